"""
Catálogos de frases habladas y mostradas en pantalla.

Cada idioma define las frases fijas del juego (ánimo, felicitación,
aviso sin voz) y la plantilla de la pista cuando la tecla no es correcta.
"""

import unicodedata
from dataclasses import dataclass


def to_display_text(text):
    """
    Convierte un texto hablado a texto dibujable con las fuentes Hershey.

    OpenCV solo dibuja ASCII: se eliminan tildes y signos como '¡' o '¿'.

    Args:
        text (str): Texto original (puede contener acentos)

    Returns:
        str: Texto ASCII equivalente
    """
    decomposed = unicodedata.normalize('NFKD', text)
    return decomposed.encode('ascii', 'ignore').decode('ascii').strip()


@dataclass(frozen=True)
class PhraseCatalog:
    """Frases de un idioma y etiqueta de idioma para la síntesis de voz."""

    locale: str
    language: str
    correct: str
    hint_template: str
    congratulations: str
    no_speech: str
    play_again: str

    def hint(self, letter):
        """Frase correctiva que nombra la letra esperada."""
        return self.hint_template.format(letter=letter)


CATALOGS = {
    'es': PhraseCatalog(
        locale='es',
        language='es-ES',
        correct='¡Muy bien!',
        hint_template='¡Casi! Pulsa la {letter}.',
        congratulations='¡Felicidades! ¡Completaste todas las letras!',
        no_speech='Tu equipo no puede reproducir voz.',
        play_again='Jugar otra vez',
    ),
    'en': PhraseCatalog(
        locale='en',
        language='en-US',
        correct='Great job!',
        hint_template='Not quite, press {letter}!',
        congratulations='Congratulations! You finished all the letters!',
        no_speech='Speech is not available on this computer.',
        play_again='Play again',
    ),
}


def get_catalog(locale):
    """
    Obtiene el catálogo de frases de un idioma.

    Raises:
        ValueError: Si el idioma no tiene catálogo
    """
    try:
        return CATALOGS[locale]
    except KeyError:
        raise ValueError(
            f"Idioma no soportado: {locale!r} (disponibles: {', '.join(sorted(CATALOGS))})"
        ) from None
