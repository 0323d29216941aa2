"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase LetterTrainerApp.
"""

import logging

import cv2

from ..config.settings import GameConfig
from ..core.keys import ESCAPE_CODE, KeyEvent
from ..core.scheduler import Scheduler
from ..core.trainer import LetterTrainer
from ..ui.images import ImageLibrary
from ..ui.renderer import UIRenderer
from ..voice.feedback import VoiceFeedback


logger = logging.getLogger(__name__)


# ============================================================================
class LetterTrainerApp:
    """
    Aplicación principal del entrenador de letras.

    Arquitectura:
        - LetterTrainer: Máquina de estados y manejo de teclado
        - VoiceFeedback: Driver de voz
        - UIRenderer: Renderizado de la pantalla
        - ImageLibrary: Imágenes ilustrativas descargadas en segundo plano
        - LetterTrainerApp: Ventana, bucle principal y cierre

    Fuentes de eventos del bucle:
        - Teclado (cv2.waitKeyEx)
        - Temporizadores vencidos (Scheduler.run_due)
        - Ratón, solo para el botón "jugar otra vez"
    """

    def __init__(self, config=None, speech=None, images=None, scheduler=None):
        """
        Inicializa los componentes. La ventana no se abre hasta run().

        Args:
            config (GameConfig): Configuración del juego (opcional)
            speech (VoiceFeedback): Driver de voz (por defecto pyttsx3)
            images (ImageLibrary): Caché de imágenes (por defecto según config.load_images)
            scheduler (Scheduler): Cola de temporizadores (opcional)
        """
        self.config = config if config else GameConfig()
        self.speech = speech if speech else VoiceFeedback(self.config)
        if images is None and self.config.load_images:
            images = ImageLibrary(timeout=self.config.image_timeout)
        self.images = images
        self.scheduler = scheduler if scheduler else Scheduler()
        self.trainer = LetterTrainer(self.speech, self.scheduler, self.config)
        self.ui = UIRenderer(self.config.width, self.config.height, self.config)
        self.window_open = False
        self.closed = False

    def render(self):
        """Dibuja el frame del estado actual."""
        index = self.trainer.state.current_index
        image = self.images.get(index) if self.images else None
        return self.ui.render(self.trainer.state, self.trainer.current_record, image)

    def process_key(self, code):
        """
        Procesa un código de cv2.waitKeyEx.

        Args:
            code (int): Código de tecla (-1 si no hubo tecla)

        Returns:
            bool: False si la aplicación debe terminar (ESC)
        """
        if code < 0:
            return True
        # ESC puede llegar como keysym X11 (0xFF1B) y con bits de modificadores
        if (code & 0xFFFF) in (ESCAPE_CODE, ESCAPE_CODE | 0xFF00):
            return False
        self.trainer.handle_key(KeyEvent.from_keycode(code))
        return True

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: el clic en el botón reinicia la partida."""
        if event != cv2.EVENT_LBUTTONUP:
            return
        if self.trainer.state.completed and self.ui.hit_play_again(x, y):
            self.trainer.reset()

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Ejecutar temporizadores vencidos (avance, palabra)
            2. Renderizar el estado actual
            3. Mostrar frame y procesar teclado
            4. Repetir hasta ESC o cierre de ventana
        """
        print("\n" + "=" * 70)
        print("ENTRENADOR DE LETRAS")
        print("=" * 70)
        print("\nPulsa en el teclado la letra que aparece en pantalla")
        if not self.config.voice_enabled:
            print("🔇 VOZ: Desactivada")
        elif not self.speech.is_available():
            print("⚠ VOZ: No disponible en este equipo")
        print("\nPresiona ESC para salir\n")
        print("=" * 70 + "\n")

        cv2.namedWindow(self.config.window_name, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(self.config.window_name, self.on_mouse)
        self.window_open = True
        if self.images:
            self.images.prefetch(self.trainer.records)
        self.trainer.start()

        try:
            while True:
                self.scheduler.run_due()
                cv2.imshow(self.config.window_name, self.render())

                key = cv2.waitKeyEx(self.config.frame_ms)
                if not self.process_key(key):
                    break
                if cv2.getWindowProperty(self.config.window_name, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            self.close()

        print("\nOK Aplicacion cerrada correctamente")

    def close(self):
        """Libera ventana, voz, imágenes y temporizadores. Idempotente."""
        if self.closed:
            return
        self.closed = True
        self.scheduler.clear()
        self.speech.shutdown()
        if self.images:
            self.images.close()
        if self.window_open:
            cv2.destroyWindow(self.config.window_name)
            self.window_open = False
        logger.debug("Recursos liberados")
