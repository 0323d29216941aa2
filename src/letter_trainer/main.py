"""
Punto de entrada del entrenador de letras.

Lee las opciones de línea de comandos, configura el registro y arranca la
aplicación.
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler

from . import __version__
from .config.messages import CATALOGS
from .config.settings import GameConfig


def build_parser():
    parser = argparse.ArgumentParser(
        prog="letter-trainer",
        description="Juego para aprender las letras del abecedario con imagen y voz",
    )
    parser.add_argument("--locale", choices=sorted(CATALOGS), default="es",
                        help="idioma de los mensajes (por defecto: es)")
    parser.add_argument("--mute", action="store_true", help="desactivar la voz")
    parser.add_argument("--no-images", action="store_true",
                        help="no descargar las imágenes ilustrativas")
    parser.add_argument("--width", type=int, default=1280, help="ancho de la ventana")
    parser.add_argument("--height", type=int, default=720, help="alto de la ventana")
    parser.add_argument("--allow-input-during-delay", action="store_true",
                        help="aceptar teclas mientras se espera el avance a la siguiente letra")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="fichero de log rotativo")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args):
    """Construye la configuración del juego a partir de los argumentos."""
    config = GameConfig()
    config.locale = args.locale
    config.voice_enabled = not args.mute
    config.load_images = not args.no_images
    config.width = args.width
    config.height = args.height
    config.ignore_input_while_advancing = not args.allow_input_during_delay
    config.log_level = args.log_level
    config.log_file = args.log_file
    return config


def setup_logging(config):
    logger = logging.getLogger("letter_trainer")
    logger.setLevel(config.log_level)

    if config.log_file:
        file_handler = RotatingFileHandler(config.log_file, maxBytes=5_000_000, backupCount=3)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(config)

    # Importación diferida: abre el motor de voz y carga OpenCV
    from .app.trainer_app import LetterTrainerApp

    LetterTrainerApp(config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
