"""
Módulo de interfaz de usuario.
Contiene el renderizador y la caché de imágenes ilustrativas.
"""

from .images import ImageLibrary
from .renderer import UIRenderer

__all__ = ['ImageLibrary', 'UIRenderer']
