"""
Entrenador de letras: juego infantil para aprender el abecedario con
imagen, palabra y voz.
"""

__version__ = "1.0.0"

__all__ = ['__version__']
