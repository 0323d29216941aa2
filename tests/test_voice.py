import logging
import threading
import time
from types import SimpleNamespace

from conftest import FakeEngine
from letter_trainer.config.settings import GameConfig
from letter_trainer.voice import feedback
from letter_trainer.voice.feedback import Pyttsx3Engine, SilentEngine, Utterance, VoiceFeedback


def test_announce_cancels_previous_utterance(config: GameConfig, engine: FakeEngine) -> None:
    speech = VoiceFeedback(config, engine)
    assert speech.announce("A", "en-US", 0.8) is True
    assert speech.announce("Apple", "en-US", 0.9) is True

    assert engine.cancelled == 2
    assert engine.active == Utterance("Apple", "en-US", 0.9, 1.0)
    assert speech.last_utterance == engine.active
    assert engine.texts == ["A", "Apple"]


def test_unavailable_speech_returns_false_and_warns_once(config: GameConfig, caplog) -> None:
    engine = FakeEngine(available=False)
    speech = VoiceFeedback(config, engine)

    with caplog.at_level(logging.WARNING, logger="letter_trainer.voice.feedback"):
        assert speech.announce("A", "en-US") is False
        assert speech.announce("B", "en-US") is False

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert engine.spoken == []
    assert speech.is_available() is False


def test_muted_voice_is_silent_but_not_a_failure(engine: FakeEngine) -> None:
    config = GameConfig()
    config.voice_enabled = False
    speech = VoiceFeedback(config, engine)
    assert speech.announce("A", "en-US") is True
    assert engine.spoken == []


def test_silent_engine_is_unavailable() -> None:
    engine = SilentEngine()
    assert engine.is_available() is False
    engine.speak(Utterance("A", "en-US"))
    engine.shutdown()


def test_shutdown_delegates_to_engine(config: GameConfig, engine: FakeEngine) -> None:
    VoiceFeedback(config, engine).shutdown()
    assert engine.shut_down is True


def test_utterance_rate_scales_words_per_minute() -> None:
    config = GameConfig()
    assert config.utterance_rate(1.0) == 150
    assert config.utterance_rate(0.8) == 120
    assert config.utterance_rate(0.9) == 135


class StubPyttsx3Engine:
    def __init__(self, voices: list) -> None:
        self.voices = voices
        self.properties: dict = {}
        self.said: list[str] = []
        self.stopped = 0
        self.on_rate = None

    def setProperty(self, name: str, value) -> None:
        self.properties[name] = value
        if name == "rate" and self.on_rate:
            self.on_rate()

    def getProperty(self, name: str):
        if name == "voices":
            return self.voices
        return self.properties.get(name)

    def say(self, text: str) -> None:
        self.said.append(text)

    def runAndWait(self) -> None:
        pass

    def stop(self) -> None:
        self.stopped += 1


class BlockingPyttsx3Engine(StubPyttsx3Engine):
    """runAndWait() blocks until stop() interrupts it, like a long utterance."""

    def __init__(self) -> None:
        super().__init__([])
        self.started = threading.Event()
        self.interrupted = threading.Event()

    def say(self, text: str) -> None:
        super().say(text)
        self.started.set()

    def runAndWait(self) -> None:
        self.interrupted.wait(timeout=5)

    def stop(self) -> None:
        super().stop()
        self.interrupted.set()


def _voice(voice_id: str, languages: list) -> SimpleNamespace:
    return SimpleNamespace(id=voice_id, name=voice_id, languages=languages)


def _wait_idle(engine: Pyttsx3Engine) -> None:
    for _ in range(500):
        if not engine.is_speaking:
            return
        time.sleep(0.01)
    raise AssertionError("speech worker did not finish")


def test_pyttsx3_init_failure_marks_engine_unavailable(monkeypatch, config: GameConfig) -> None:
    def broken_init():
        raise RuntimeError("no driver")

    monkeypatch.setattr(feedback.pyttsx3, "init", broken_init)
    engine = Pyttsx3Engine(config)
    assert engine.is_available() is False
    assert VoiceFeedback(config, engine).announce("A", "en-US") is False


def test_default_engine_falls_back_to_silent(monkeypatch, config: GameConfig) -> None:
    def broken_init():
        raise RuntimeError("no driver")

    monkeypatch.setattr(feedback.pyttsx3, "init", broken_init)
    speech = VoiceFeedback(config)
    assert isinstance(speech.engine, SilentEngine)
    assert speech.is_available() is False
    assert speech.announce("A", "en-US") is False


def test_pyttsx3_engine_selects_voice_by_language(monkeypatch, config: GameConfig) -> None:
    stub = StubPyttsx3Engine([
        _voice("english", [b"\x05en-gb"]),
        _voice("english-us", [b"\x05en-us"]),
        _voice("spanish", [b"\x05es"]),
    ])
    monkeypatch.setattr(feedback.pyttsx3, "init", lambda: stub)
    engine = Pyttsx3Engine(config)

    assert engine._voice_for("en-US") == "english-us"
    assert engine._voice_for("es-ES") == "spanish"
    assert engine._voice_for("fr-FR") is None
    assert stub.properties["volume"] == config.voice_volume


def test_pyttsx3_engine_plays_on_worker_thread(monkeypatch, config: GameConfig) -> None:
    stub = StubPyttsx3Engine([_voice("com.apple.voice.en-US.Samantha", [])])
    monkeypatch.setattr(feedback.pyttsx3, "init", lambda: stub)
    engine = Pyttsx3Engine(config)

    engine.speak(Utterance("Apple", "en-US", 0.9))
    _wait_idle(engine)

    assert stub.said == ["Apple"]
    assert stub.properties["rate"] == 135
    assert stub.properties["voice"] == "com.apple.voice.en-US.Samantha"



def test_pyttsx3_engine_newest_request_wins(monkeypatch, config: GameConfig) -> None:
    stub = BlockingPyttsx3Engine()
    monkeypatch.setattr(feedback.pyttsx3, "init", lambda: stub)
    engine = Pyttsx3Engine(config)

    engine.speak(Utterance("A", "en-US"))
    assert stub.started.wait(timeout=5)
    engine.speak(Utterance("Apple", "en-US"))
    engine.speak(Utterance("B", "en-US"))
    assert list(engine.pending) == [Utterance("B", "en-US")]

    engine.cancel()
    assert stub.stopped == 1
    assert list(engine.pending) == []
    engine.speak(Utterance("Ball", "en-US"))
    _wait_idle(engine)

    assert stub.said == ["A", "Ball"]


def test_cancel_before_playback_skips_taken_utterance(monkeypatch, config: GameConfig) -> None:
    stub = StubPyttsx3Engine([])
    monkeypatch.setattr(feedback.pyttsx3, "init", lambda: stub)
    engine = Pyttsx3Engine(config)

    # the worker has already taken "A" off the queue when cancel() runs
    stub.on_rate = engine.cancel
    engine.speak(Utterance("A", "en-US"))
    _wait_idle(engine)
    assert stub.said == []
    assert stub.stopped == 1

    stub.on_rate = None
    engine.speak(Utterance("Apple", "en-US"))
    _wait_idle(engine)
    assert stub.said == ["Apple"]
