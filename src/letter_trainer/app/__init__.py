"""
Módulo de la aplicación principal.
Contiene la clase que integra todos los componentes.
"""

from .trainer_app import LetterTrainerApp

__all__ = ['LetterTrainerApp']
