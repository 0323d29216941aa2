import numpy as np
import pytest

from letter_trainer.config.settings import GameConfig
from letter_trainer.core.alphabet import LETTER_RECORDS
from letter_trainer.core.session import SessionState
from letter_trainer.ui.renderer import BUTTON_COLOR, LETTER_COLOR, PLACEHOLDER_COLOR, UIRenderer


@pytest.fixture
def ui() -> UIRenderer:
    return UIRenderer(1280, 720, GameConfig())


def _has_color(frame: np.ndarray, color: tuple) -> bool:
    return bool(np.all(frame == np.array(color, dtype=np.uint8), axis=-1).any())


def test_playing_view_draws_letter_and_placeholder(ui: UIRenderer) -> None:
    frame = ui.render(SessionState(), LETTER_RECORDS[0])
    assert frame.shape == (720, 1280, 3)
    assert frame.dtype == np.uint8
    assert _has_color(frame, LETTER_COLOR)
    assert _has_color(frame, PLACEHOLDER_COLOR)
    assert not _has_color(frame, BUTTON_COLOR)


def test_render_is_a_function_of_state(ui: UIRenderer) -> None:
    state = SessionState(current_index=3, message="Muy bien!")
    first = ui.render(state, LETTER_RECORDS[3])
    second = ui.render(state, LETTER_RECORDS[3])
    assert np.array_equal(first, second)

    without_message = ui.render(SessionState(current_index=3), LETTER_RECORDS[3])
    assert not np.array_equal(first, without_message)


def test_image_replaces_placeholder(ui: UIRenderer) -> None:
    image = np.zeros((192, 192, 4), dtype=np.uint8)
    image[..., 2] = 255
    image[..., 3] = 255
    frame = ui.render(SessionState(), LETTER_RECORDS[0], image)
    assert _has_color(frame, (0, 0, 255))
    assert not _has_color(frame, PLACEHOLDER_COLOR)


@pytest.mark.parametrize("shape", [(50, 100), (100, 50, 3)])
def test_grayscale_and_bgr_images(ui: UIRenderer, shape: tuple) -> None:
    image = np.full(shape, 10, dtype=np.uint8)
    frame = ui.render(SessionState(), LETTER_RECORDS[1], image)
    assert _has_color(frame, (10, 10, 10))


def test_completed_view_has_play_again_button(ui: UIRenderer) -> None:
    frame = ui.render(SessionState(current_index=25, completed=True), LETTER_RECORDS[25])
    bx, by, bw, bh = ui.button_rect
    assert tuple(frame[by + 2, bx + 2]) == BUTTON_COLOR
    assert not _has_color(frame, LETTER_COLOR)


def test_hit_play_again(ui: UIRenderer) -> None:
    bx, by, bw, bh = ui.button_rect
    assert ui.hit_play_again(bx + bw // 2, by + bh // 2)
    assert ui.hit_play_again(bx, by)
    assert not ui.hit_play_again(bx - 1, by)
    assert not ui.hit_play_again(bx + bw // 2, by + bh + 1)
