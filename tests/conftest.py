from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from letter_trainer.config.settings import GameConfig  # noqa: E402
from letter_trainer.core.scheduler import Scheduler  # noqa: E402
from letter_trainer.core.trainer import LetterTrainer  # noqa: E402
from letter_trainer.voice.feedback import SpeechEngine, VoiceFeedback  # noqa: E402


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FakeEngine(SpeechEngine):
    """Speech engine that records utterances instead of playing them."""

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.spoken: list = []
        self.active = None
        self.cancelled = 0
        self.shut_down = False

    def is_available(self) -> bool:
        return self.available

    def speak(self, utterance) -> None:
        assert self.active is None, "previous utterance was not cancelled"
        self.active = utterance
        self.spoken.append(utterance)

    def cancel(self) -> None:
        self.cancelled += 1
        self.active = None

    def shutdown(self) -> None:
        self.shut_down = True
        self.active = None

    @property
    def texts(self) -> list[str]:
        return [utterance.text for utterance in self.spoken]


@pytest.fixture
def config() -> GameConfig:
    cfg = GameConfig()
    cfg.load_images = False
    return cfg


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def scheduler(clock: FakeClock) -> Scheduler:
    return Scheduler(clock)


@pytest.fixture
def speech(config: GameConfig, engine: FakeEngine) -> VoiceFeedback:
    return VoiceFeedback(config, engine)


@pytest.fixture
def trainer(speech: VoiceFeedback, scheduler: Scheduler, config: GameConfig) -> LetterTrainer:
    game = LetterTrainer(speech, scheduler, config)
    game.start()
    return game
