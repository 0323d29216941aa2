"""
Módulo de síntesis de voz.
Contiene el driver de voz y los motores disponibles.
"""

from .feedback import Pyttsx3Engine, SilentEngine, SpeechEngine, Utterance, VoiceFeedback

__all__ = ['Pyttsx3Engine', 'SilentEngine', 'SpeechEngine', 'Utterance', 'VoiceFeedback']
