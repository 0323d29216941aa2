"""
Módulo de configuración del entrenador de letras.
Contiene las preferencias del juego y los catálogos de frases.
"""

from .settings import GameConfig
from .messages import PhraseCatalog, get_catalog

__all__ = ['GameConfig', 'PhraseCatalog', 'get_catalog']
