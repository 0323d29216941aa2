"""
Eventos de teclado normalizados a partir de los códigos de cv2.waitKeyEx.
"""

from dataclasses import dataclass


ESCAPE_CODE = 27

# Nombres de teclas de control (códigos ASCII que devuelve cv2.waitKeyEx)
_NAMED_KEYS = {
    8: 'Backspace',
    9: 'Tab',
    10: 'Enter',
    13: 'Enter',
    27: 'Escape',
    127: 'Delete',
}


@dataclass(frozen=True)
class KeyEvent:
    """Tecla pulsada, con el nombre de la tecla al estilo de KeyboardEvent.key."""

    key: str
    code: int = -1

    @classmethod
    def from_keycode(cls, code):
        """
        Crea un evento a partir del código devuelto por cv2.waitKeyEx.

        Los bits 16 en adelante son modificadores (Bloq Num, Mayús) y se
        descartan. Un keysym por encima de 0xFF es una tecla especial
        (flechas, Inicio, Insert...) y nunca se confunde con una letra.

        Args:
            code (int): Código de la tecla sin enmascarar

        Returns:
            KeyEvent: Evento con el carácter imprimible o el nombre de la tecla
        """
        keysym = code & 0xFFFF
        if keysym > 0xFF:
            return cls('Unidentified', code)
        if keysym in _NAMED_KEYS:
            return cls(_NAMED_KEYS[keysym], code)
        if 32 <= keysym <= 126:
            return cls(chr(keysym), code)
        return cls('Unidentified', code)

    def matches(self, letter):
        """Comparación sin distinguir mayúsculas con la letra esperada."""
        return self.key.upper() == letter.upper()
