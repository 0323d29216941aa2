"""
Estado de la sesión de juego.

Este módulo contiene el contenedor de estado que comparten el manejador de
teclado (que lo modifica) y el renderizador (que solo lo lee).
"""

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    """Fase de la máquina de estados."""

    PLAYING = 'playing'
    COMPLETED = 'completed'


# ============================================================================
# CLASE: SessionState
# Propósito: Estado mutable de una partida
# Invariantes:
#   - completed implica current_index == última posición
#   - current_index solo crece, salvo en reset()
# ============================================================================
@dataclass
class SessionState:
    """
    Estado de la partida en curso.

    Atributos:
        current_index (int): Posición de la letra activa (0-25)
        message (str): Mensaje de feedback visible (puede estar vacío)
        completed (bool): True cuando se han acertado todas las letras
    """

    current_index: int = 0
    message: str = ''
    completed: bool = False

    @property
    def phase(self):
        return Phase.COMPLETED if self.completed else Phase.PLAYING

    def reset(self):
        """Vuelve al estado inicial: Playing(0) sin mensaje."""
        self.current_index = 0
        self.message = ''
        self.completed = False
