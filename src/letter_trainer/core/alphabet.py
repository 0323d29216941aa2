"""
Secuencia del abecedario y registros de palabra/imagen por letra.
"""

from dataclasses import dataclass


ALPHABET = tuple('ABCDEFGHIJKLMNOPQRSTUVWXYZ')

_ICON_BASE = 'https://img.icons8.com/color/192'


@dataclass(frozen=True)
class LetterRecord:
    """Letra con su palabra ilustrativa y la URL de su imagen."""

    letter: str
    word: str
    image_url: str


def _record(letter, word, icon):
    return LetterRecord(letter, word, f'{_ICON_BASE}/{icon}.png')


# Un registro por posición, mismo orden que ALPHABET
LETTER_RECORDS = (
    _record('A', 'Apple', 'apple'),
    _record('B', 'Ball', 'football2'),
    _record('C', 'Cat', 'cat'),
    _record('D', 'Dog', 'dog'),
    _record('E', 'Elephant', 'elephant'),
    _record('F', 'Fish', 'fish'),
    _record('G', 'Grapes', 'grapes'),
    _record('H', 'Hat', 'hat'),
    _record('I', 'Ice', 'ice-cream'),
    _record('J', 'Juice', 'orange-juice'),
    _record('K', 'Kite', 'kite'),
    _record('L', 'Lion', 'lion'),
    _record('M', 'Monkey', 'monkey'),
    _record('N', 'Nest', 'nest'),
    _record('O', 'Orange', 'orange'),
    _record('P', 'Pig', 'pig'),
    _record('Q', 'Queen', 'queen-king'),
    _record('R', 'Rabbit', 'rabbit'),
    _record('S', 'Sun', 'sun'),
    _record('T', 'Tiger', 'tiger'),
    _record('U', 'Umbrella', 'umbrella'),
    _record('V', 'Violin', 'violin'),
    _record('W', 'Whale', 'whale'),
    _record('X', 'Xylophone', 'xylophone'),
    _record('Y', 'Yacht', 'yacht'),
    _record('Z', 'Zebra', 'zebra'),
)
