"""
Máquina de estados de progresión por el abecedario.

Este módulo contiene la clase LetterTrainer, que recibe los dos tipos de
evento del juego (teclas y vencimiento de temporizadores) y actualiza el
estado de la sesión.
"""

import logging

from ..config.messages import get_catalog, to_display_text
from ..config.settings import GameConfig
from .alphabet import LETTER_RECORDS
from .session import SessionState


logger = logging.getLogger(__name__)

# Multiplicadores (velocidad, tono) de cada tipo de locución
LETTER_VOICE = (0.8, 1.0)
WORD_VOICE = (0.9, 1.0)
CORRECT_VOICE = (1.0, 1.2)
HINT_VOICE = (1.0, 1.0)
CONGRATULATIONS_VOICE = (0.9, 1.0)


# ============================================================================
# CLASE: LetterTrainer
# Propósito: Progresión de letras y manejo de teclado
# Estados:
#   - Playing(i): se espera la letra en la posición i
#   - Completed: todas las letras acertadas (absorbente para el teclado)
# Transiciones:
#   - Playing(i) + acierto  -> tras feedback_delay_ms -> Playing(i+1) / Completed
#   - Playing(i) + fallo    -> Playing(i), mensaje = pista con la letra esperada
#   - Completed  + reset    -> Playing(0)
# ============================================================================
class LetterTrainer:
    """
    Lógica del juego: estado de la sesión, teclado y voz.

    Arquitectura:
        - SessionState: estado compartido con el renderizador (solo lectura allí)
        - VoiceFeedback: driver de voz inyectado
        - Scheduler: temporizadores de un solo disparo que drena el bucle de UI

    Cada tecla no suprimida produce exactamente una locución. Mientras hay
    un avance pendiente las teclas se ignoran, salvo que
    config.ignore_input_while_advancing sea False.
    """

    def __init__(self, speech, scheduler, config=None, records=LETTER_RECORDS, state=None):
        """
        Args:
            speech (VoiceFeedback): Driver de voz
            scheduler (Scheduler): Cola de temporizadores
            config (GameConfig): Configuración del juego (opcional)
            records (tuple): Registros de letra, uno por posición
            state (SessionState): Estado inicial (opcional, por defecto Playing(0))
        """
        self.config = config if config else GameConfig()
        self.speech = speech
        self.scheduler = scheduler
        self.records = tuple(records)
        self.phrases = get_catalog(self.config.locale)
        self.state = state if state else SessionState()
        self.completions = 0            # Veces que se ha felicitado al jugador
        self._pending_advances = 0      # Avances programados aún sin ejecutar

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------
    @property
    def phase(self):
        return self.state.phase

    @property
    def last_index(self):
        return len(self.records) - 1

    @property
    def current_record(self):
        return self.records[self.state.current_index]

    @property
    def expected_letter(self):
        return self.current_record.letter

    @property
    def transition_pending(self):
        """True entre un acierto y el avance que programa."""
        return self._pending_advances > 0

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------
    def start(self):
        """Anuncia la letra inicial, como al montar la pantalla del juego."""
        if not self.state.completed:
            self._announce_current_letter()

    def handle_key(self, event):
        """
        Procesa una tecla pulsada.

        Args:
            event (KeyEvent): Tecla normalizada

        Returns:
            bool: True si la tecla se procesó, False si se descartó
                (partida completada o avance pendiente)
        """
        if self.state.completed:
            return False
        if self.transition_pending and self.config.ignore_input_while_advancing:
            logger.debug("Tecla %r ignorada durante el avance", event.key)
            return False

        expected = self.expected_letter
        if event.matches(expected):
            logger.debug("Acierto: %s", expected)
            self.state.message = to_display_text(self.phrases.correct)
            self._say(self.phrases.correct, self.phrases.language, *CORRECT_VOICE)
            self._pending_advances += 1
            self.scheduler.call_later(self.config.feedback_delay_ms, self._advance, self.completions)
        else:
            logger.debug("Fallo: %r en lugar de %s", event.key, expected)
            hint = self.phrases.hint(expected)
            self.state.message = to_display_text(hint)
            self._say(hint, self.phrases.language, *HINT_VOICE)
        return True

    def reset(self):
        """
        Reinicia la partida desde el control "jugar otra vez".

        Returns:
            bool: True si se reinició (solo es posible en Completed)
        """
        if not self.state.completed:
            return False
        logger.info("Partida reiniciada")
        self.state.reset()
        self._pending_advances = 0
        self._announce_current_letter()
        return True

    # ------------------------------------------------------------------
    # Callbacks de temporizador
    # ------------------------------------------------------------------
    def _advance(self, generation):
        if generation != self.completions:
            return
        self._pending_advances = max(self._pending_advances - 1, 0)
        if self.state.completed:
            return

        self.state.message = ''
        if self.state.current_index < self.last_index:
            self.state.current_index += 1
            logger.debug("Siguiente letra: %s", self.expected_letter)
            self._announce_current_letter()
        else:
            self.state.completed = True
            self.completions += 1
            logger.info("Abecedario completado")
            self._say(self.phrases.congratulations, self.phrases.language, *CONGRATULATIONS_VOICE)

    def _announce_word(self, index, generation):
        # La sesión pudo avanzar o reiniciarse desde que se programó la palabra
        stale = (self.state.completed or self.state.current_index != index
                 or generation != self.completions)
        if stale or self.transition_pending:
            logger.debug("Palabra de la posición %d descartada", index)
            return
        self._say(self.records[index].word, self.config.letter_language, *WORD_VOICE)

    # ------------------------------------------------------------------
    # Voz
    # ------------------------------------------------------------------
    def _announce_current_letter(self):
        index = self.state.current_index
        self._say(self.records[index].letter, self.config.letter_language, *LETTER_VOICE)
        self.scheduler.call_later(self.config.word_delay_ms, self._announce_word, index, self.completions)

    def _say(self, text, language, rate, pitch):
        if not self.speech.announce(text, language, rate, pitch):
            self.state.message = to_display_text(self.phrases.no_speech)
