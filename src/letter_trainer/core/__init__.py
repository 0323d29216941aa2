"""
Módulo core con la lógica principal del juego.
Contiene el abecedario, el estado de la sesión, los temporizadores y la
máquina de estados de progresión.
"""

from .alphabet import ALPHABET, LETTER_RECORDS, LetterRecord
from .keys import KeyEvent
from .scheduler import Scheduler
from .session import Phase, SessionState
from .trainer import LetterTrainer

__all__ = [
    'ALPHABET', 'LETTER_RECORDS', 'LetterRecord', 'KeyEvent', 'Scheduler',
    'Phase', 'SessionState', 'LetterTrainer',
]
