"""
Configuración centralizada del entrenador de letras.

Este módulo contiene las preferencias de voz, tiempos, ventana, imágenes
y registro que comparten todos los componentes del juego.
"""


# ============================================================================
# CLASE: GameConfig
# Propósito: Preferencias del juego en un único objeto inyectable
# Responsabilidades:
#   - Almacenar preferencias de voz (activación, volumen, velocidad, idioma)
#   - Definir los tiempos de la máquina de estados (retardo de avance, palabra)
#   - Configurar ventana, carga de imágenes y registro
# ============================================================================
class GameConfig:
    """
    Configuración del entrenador de letras.

    Opciones disponibles:
        - Voz configurable (volumen, velocidad base, idioma de frases y letras)
        - Tiempos del juego (retardo tras acierto, retardo de la palabra)
        - Política de teclas durante el avance pendiente
        - Ventana, imágenes remotas y fichero de log
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar la voz
        self.voice_volume = 1.0             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad base (palabras por minuto)
        self.locale = 'es'                  # Idioma de frases ('es', 'en')
        self.letter_language = 'en-US'      # Idioma de letras y palabras

        # ====================================================================
        # TIEMPOS DEL JUEGO (milisegundos)
        # ====================================================================
        self.feedback_delay_ms = 700        # Pausa tras acierto antes de avanzar
        self.word_delay_ms = 800            # Pausa entre la letra y su palabra
        self.ignore_input_while_advancing = True
        self.frame_ms = 33                  # Espera de cv2.waitKeyEx (~30 FPS)

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_name = 'Entrenador de Letras'
        self.width = 1280
        self.height = 720

        # ====================================================================
        # IMÁGENES ILUSTRATIVAS
        # ====================================================================
        self.load_images = True             # Descargar imágenes remotas
        self.image_timeout = 5.0            # Timeout por imagen (segundos)

        # ====================================================================
        # REGISTRO
        # ====================================================================
        self.log_level = 'INFO'
        self.log_file = None                # Ruta opcional de log rotativo

    def utterance_rate(self, multiplier):
        """
        Calcula la velocidad de habla para un multiplicador dado.

        Args:
            multiplier (float): Multiplicador relativo (1.0 = velocidad base)

        Returns:
            int: Palabras por minuto para el motor de voz
        """
        return int(round(self.voice_rate * multiplier))
