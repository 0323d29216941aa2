"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja la pantalla del juego a
partir del estado de la sesión. No contiene lógica de juego.
"""

import math

import cv2
import numpy as np

from ..config.messages import get_catalog, to_display_text
from ..config.settings import GameConfig


# Colores BGR
BACKGROUND = (255, 246, 239)
CARD = (255, 255, 255)
LETTER_COLOR = (216, 78, 29)
WORD_COLOR = (55, 41, 31)
MESSAGE_COLOR = (81, 65, 55)
SUCCESS_COLOR = (74, 163, 22)
BUTTON_COLOR = (246, 130, 59)
PLACEHOLDER_COLOR = (235, 225, 215)

IMAGE_SIZE = 120


# ============================================================================
class UIRenderer:
    """
    Renderizador de la pantalla del entrenador de letras.

    Componentes visuales:
        1. Letra actual a gran tamaño
        2. Imagen ilustrativa (o marcador si no se ha cargado)
        3. Palabra asociada
        4. Mensaje de feedback (ánimo, pista o aviso sin voz)
        5. Vista final con felicitación y botón "jugar otra vez"
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con las dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (GameConfig): Configuración del juego (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else GameConfig()
        self.phrases = get_catalog(self.config.locale)
        self.play_again_label = to_display_text(self.phrases.play_again)

        # Botón centrado en el tercio inferior
        bw, bh = 340, 80
        bx = (width - bw) // 2
        by = int(height * 0.68)
        self.button_rect = (bx, by, bw, bh)

    def render(self, state, record, image=None):
        """
        Dibuja un frame completo a partir del estado.

        Args:
            state (SessionState): Estado de la sesión
            record (LetterRecord): Registro de la letra activa
            image (np.array): Imagen ilustrativa decodificada (opcional)

        Returns:
            np.array: Frame BGR de height x width
        """
        frame = np.full((self.height, self.width, 3), BACKGROUND, dtype=np.uint8)
        margin = 24
        cv2.rectangle(frame, (margin, margin), (self.width - margin, self.height - margin), CARD, -1)

        if state.completed:
            self.draw_completed(frame)
        else:
            self.draw_playing(frame, record, image, state.message)
        return frame

    def draw_playing(self, img, record, image, message):
        """
        Dibuja la letra, la imagen, la palabra y el mensaje.

        Tamaños:
            - Letra: ~45% de la altura de la ventana
            - Imagen: 120x120 px
            - Palabra y mensaje: fuentes fijas bajo la imagen
        """
        font = cv2.FONT_HERSHEY_DUPLEX
        thickness = max(4, self.height // 60)
        glyph_h = cv2.getTextSize('W', font, 1.0, thickness)[0][1]
        scale = (self.height * 0.45) / glyph_h
        top = int(self.height * 0.08)

        (text_w, text_h), _ = cv2.getTextSize(record.letter, font, scale, thickness)
        cv2.putText(img, record.letter, ((self.width - text_w) // 2, top + text_h),
                    font, scale, LETTER_COLOR, thickness, cv2.LINE_AA)

        tile_y = top + text_h + int(self.height * 0.04)
        self.draw_image(img, image, ((self.width - IMAGE_SIZE) // 2, tile_y))

        word_y = tile_y + IMAGE_SIZE + 45
        self._centered_text(img, record.word, word_y, 1.3, WORD_COLOR, 3)

        if message:
            self._centered_text(img, message, word_y + 55, 1.0, MESSAGE_COLOR, 2)

    def draw_image(self, img, image, origin):
        """
        Pega la imagen ilustrativa escalada dentro de un cuadro de 120x120.

        Las imágenes con canal alfa se mezclan sobre el fondo de la tarjeta.
        Sin imagen se dibuja un cuadro gris de marcador.
        """
        x, y = origin
        if y + IMAGE_SIZE > img.shape[0] or x < 0:
            return
        if image is None:
            cv2.rectangle(img, (x, y), (x + IMAGE_SIZE, y + IMAGE_SIZE), PLACEHOLDER_COLOR, -1)
            return

        if image.ndim == 2:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGRA)
        elif image.shape[2] == 3:
            image = cv2.cvtColor(image, cv2.COLOR_BGR2BGRA)

        h, w = image.shape[:2]
        factor = IMAGE_SIZE / max(h, w)
        new_w, new_h = max(1, int(w * factor)), max(1, int(h * factor))
        resized = cv2.resize(image, (new_w, new_h), interpolation=cv2.INTER_AREA)

        ox = x + (IMAGE_SIZE - new_w) // 2
        oy = y + (IMAGE_SIZE - new_h) // 2
        region = img[oy:oy + new_h, ox:ox + new_w].astype(np.float32)
        alpha = resized[:, :, 3:4].astype(np.float32) / 255.0
        blended = resized[:, :, :3].astype(np.float32) * alpha + region * (1.0 - alpha)
        img[oy:oy + new_h, ox:ox + new_w] = blended.astype(np.uint8)

    def draw_completed(self, img):
        """
        Dibuja la vista final: cara de fiesta, felicitación y botón.
        """
        cx, cy = self.width // 2, int(self.height * 0.25)
        radius = max(30, self.height // 9)

        # Cara sonriente con gorro de fiesta
        cv2.circle(img, (cx, cy), radius, (80, 210, 255), -1, cv2.LINE_AA)
        eye_dx, eye_y = radius // 3, cy - radius // 4
        cv2.circle(img, (cx - eye_dx, eye_y), radius // 9, WORD_COLOR, -1, cv2.LINE_AA)
        cv2.circle(img, (cx + eye_dx, eye_y), radius // 9, WORD_COLOR, -1, cv2.LINE_AA)
        cv2.ellipse(img, (cx, cy + radius // 8), (radius // 2, radius // 3), 0, 10, 170,
                    WORD_COLOR, max(2, radius // 15), cv2.LINE_AA)
        hat = np.array([[cx - radius // 2, cy - int(radius * 0.85)],
                        [cx + radius // 2, cy - int(radius * 0.85)],
                        [cx + radius // 6, cy - int(radius * 1.8)]], dtype=np.int32)
        cv2.fillPoly(img, [hat], (180, 105, 255), cv2.LINE_AA)

        # Confeti alrededor
        for i in range(12):
            angle = math.radians(i * 30)
            px = int(cx + radius * 1.6 * math.cos(angle))
            py = int(cy + radius * 1.6 * math.sin(angle))
            color = (BUTTON_COLOR, SUCCESS_COLOR, (80, 210, 255))[i % 3]
            cv2.circle(img, (px, py), 6, color, -1, cv2.LINE_AA)

        message = to_display_text(self.phrases.congratulations)
        self._centered_text(img, message, int(self.height * 0.55), 1.2, SUCCESS_COLOR, 3)

        bx, by, bw, bh = self.button_rect
        cv2.rectangle(img, (bx, by), (bx + bw, by + bh), BUTTON_COLOR, -1)
        (tw, th), _ = cv2.getTextSize(self.play_again_label, cv2.FONT_HERSHEY_DUPLEX, 1.1, 2)
        cv2.putText(img, self.play_again_label, (bx + (bw - tw) // 2, by + (bh + th) // 2),
                    cv2.FONT_HERSHEY_DUPLEX, 1.1, CARD, 2, cv2.LINE_AA)

    def hit_play_again(self, x, y):
        """True si el punto (x, y) cae dentro del botón "jugar otra vez"."""
        bx, by, bw, bh = self.button_rect
        return bx <= x <= bx + bw and by <= y <= by + bh

    def _centered_text(self, img, text, y, scale, color, thickness):
        font = cv2.FONT_HERSHEY_DUPLEX
        text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        # Reducir la fuente si el texto no cabe en la tarjeta
        available = self.width - 80
        if text_w > available:
            scale *= available / text_w
            text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        cv2.putText(img, text, ((self.width - text_w) // 2, y), font, scale, color, thickness, cv2.LINE_AA)
