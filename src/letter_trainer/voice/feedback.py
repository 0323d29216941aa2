"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para anunciar letras, palabras,
ánimos y pistas. La reproducción se ejecuta en un hilo aparte para no
bloquear la interfaz, y cada petición nueva interrumpe la anterior.
"""

import logging
import re
import threading
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass

import pyttsx3


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Utterance:
    """Petición de voz: texto, etiqueta de idioma y multiplicadores."""

    text: str
    language: str
    rate: float = 1.0
    pitch: float = 1.0


class SpeechEngine(ABC):
    """Capacidad de síntesis de voz de la plataforma."""

    @abstractmethod
    def is_available(self):
        """True si la plataforma puede reproducir voz."""

    @abstractmethod
    def speak(self, utterance):
        """Empieza a reproducir la locución sin esperar a que termine."""

    @abstractmethod
    def cancel(self):
        """Detiene la locución en curso, si la hay."""

    def shutdown(self):
        self.cancel()


class SilentEngine(SpeechEngine):
    """Plataforma sin síntesis de voz."""

    def is_available(self):
        return False

    def speak(self, utterance):
        pass

    def cancel(self):
        pass


# ============================================================================
# CLASE: Pyttsx3Engine
# Propósito: Motor de voz del sistema operativo vía pyttsx3
# Responsabilidades:
#   - Reproducir en un hilo separado para no bloquear la UI
#   - Mantener como máximo una locución pendiente (la más reciente gana)
#   - Elegir la voz según la etiqueta de idioma de cada locución
# ============================================================================
class Pyttsx3Engine(SpeechEngine):
    """
    Motor de voz basado en pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Sin cola: una locución nueva sustituye a la pendiente y detiene la actual
        - Velocidad en palabras por minuto derivada de GameConfig.voice_rate
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (GameConfig): Configuración del juego
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.pending = deque(maxlen=1)      # Solo la locución más reciente
        self._lock = threading.Lock()
        self._generation = 0                 # Aumenta con cada cancel()
        self._voices_by_language = {}
        self._warned_pitch = False

        try:
            self.engine = pyttsx3.init()
            self.engine.setProperty('volume', self.config.voice_volume)
            logger.info("Sistema de voz inicializado correctamente")
        except Exception as e:
            logger.warning("No se pudo inicializar el sistema de voz: %s", e)
            self.engine = None

    def is_available(self):
        return self.engine is not None

    def speak(self, utterance):
        """
        Reproduce una locución de forma asíncrona.

        Si ya hay un hilo reproduciendo, la locución queda pendiente
        (sustituyendo a cualquier otra pendiente) y se reproduce en cuanto
        termine o se detenga la actual.
        """
        if not self.engine:
            return

        with self._lock:
            self.pending.append(utterance)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def cancel(self):
        with self._lock:
            self.pending.clear()
            self._generation += 1
            speaking = self.is_speaking
        if speaking and self.engine:
            self.engine.stop()

    def _process_queue(self):
        """Reproduce locuciones hasta que no quede ninguna pendiente."""
        while True:
            with self._lock:
                if not self.pending:
                    self.is_speaking = False
                    return
                utterance = self.pending.popleft()
                generation = self._generation
            try:
                self._configure(utterance)
                with self._lock:
                    # Descartar si hubo un cancel() entre popleft() y say()
                    if generation != self._generation:
                        logger.debug("Locución sustituida antes de empezar: %r", utterance.text)
                        continue
                    self.engine.say(utterance.text)
                self.engine.runAndWait()
            except Exception as e:
                logger.warning("Error al reproducir voz %r: %s", utterance.text, e)

    def _configure(self, utterance):
        self.engine.setProperty('rate', self.config.utterance_rate(utterance.rate))
        voice_id = self._voice_for(utterance.language)
        if voice_id:
            self.engine.setProperty('voice', voice_id)
        # pyttsx3 no expone el tono en todos los drivers
        if utterance.pitch != 1.0 and not self._warned_pitch:
            logger.debug("El motor de voz ignora el tono (%.1f)", utterance.pitch)
            self._warned_pitch = True

    def _voice_for(self, language):
        """
        Busca una voz instalada para la etiqueta de idioma ('es-ES', 'en-US').

        Prioridad: coincidencia exacta de región > mismo idioma. El resultado
        se guarda en caché, incluido None si no hay voz.
        """
        if language in self._voices_by_language:
            return self._voices_by_language[language]

        tag = language.lower().replace('_', '-')
        exact_pattern = _language_pattern(tag)
        base_pattern = _language_pattern(tag.split('-')[0])
        exact = partial = None
        for voice in self.engine.getProperty('voices'):
            names = [_language_name(lang) for lang in (getattr(voice, 'languages', None) or [])]
            names.append(_language_name(voice.id))
            if exact is None and any(exact_pattern.search(name) for name in names):
                exact = voice.id
            if partial is None and any(base_pattern.search(name) for name in names):
                partial = voice.id
        voice_id = exact or partial
        if voice_id is None:
            logger.warning("No se encontró voz para %s. Usando voz predeterminada.", language)
        else:
            logger.debug("Voz para %s: %s", language, voice_id)
        self._voices_by_language[language] = voice_id
        return voice_id

    def shutdown(self):
        self.cancel()
        self.engine = None


def _language_name(lang):
    # El driver espeak devuelve bytes con un prefijo de prioridad (b'\x05en-us')
    if isinstance(lang, bytes):
        lang = lang[1:].decode('ascii', 'ignore')
    return str(lang).lower().replace('_', '-')


def _language_pattern(tag):
    # 'en-us' dentro de 'gmw/en-us', 'com.apple.voice.en-us.samantha' o 'tts-ms-en-us-zira'
    return re.compile(rf'(^|[^a-z]){re.escape(tag)}($|[^a-z])')


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Driver de voz que usa el juego
# Responsabilidades:
#   - Comprobar la capacidad de voz antes de cada petición
#   - Cancelar la locución en curso antes de empezar otra
#   - Informar al llamador cuando no hay voz (para mostrar el aviso)
# ============================================================================
class VoiceFeedback:
    """
    Driver de voz del entrenador de letras.

    announce() nunca lanza excepciones por falta de voz: devuelve False y el
    juego muestra el mensaje alternativo en pantalla.
    """

    def __init__(self, config, engine=None):
        """
        Args:
            config (GameConfig): Configuración del juego
            engine (SpeechEngine): Motor a usar (por defecto Pyttsx3Engine, o
                SilentEngine si pyttsx3 no arranca)
        """
        self.config = config
        if engine is None:
            engine = Pyttsx3Engine(config)
            if not engine.is_available():
                engine = SilentEngine()
        self.engine = engine
        self.last_utterance = None
        self._warned_unavailable = False

    def is_available(self):
        return self.engine.is_available()

    def announce(self, text, language, rate=1.0, pitch=1.0):
        """
        Pide la reproducción de un texto, interrumpiendo la anterior.

        Args:
            text (str): Texto a sintetizar
            language (str): Etiqueta de idioma ('es-ES', 'en-US')
            rate (float): Multiplicador de velocidad
            pitch (float): Multiplicador de tono

        Returns:
            bool: False si la plataforma no tiene voz; True en otro caso
                (también con la voz silenciada por el usuario)
        """
        if not self.config.voice_enabled:
            return True

        if not self.engine.is_available():
            if not self._warned_unavailable:
                logger.warning("Síntesis de voz no disponible; no se pueden reproducir mensajes")
                self._warned_unavailable = True
            return False

        utterance = Utterance(text, language, rate, pitch)
        self.engine.cancel()
        self.engine.speak(utterance)
        self.last_utterance = utterance
        logger.debug("Voz: %r (%s, x%.1f)", text, language, rate)
        return True

    def shutdown(self):
        self.engine.shutdown()
