import pytest

from glyph_rogue.renderer.draw import Fill
from glyph_rogue.renderer.health_bar import health_bar_commands, health_bar_width
from glyph_rogue.types import RED, Vector


@pytest.mark.parametrize(
    "hp, max_hp, expected",
    [
        (3, 5, 60.0),
        (0, 5, 0.0),
        (5, 5, 100.0),
        (3, 0, 0.0),
        (0, 0, 0.0),
        (9, 5, 100.0),
        (-2, 5, 0.0),
    ],
)
def test_health_bar_width(hp: int, max_hp: int, expected: float) -> None:
    assert health_bar_width(hp, max_hp, 100) == pytest.approx(expected)


def test_background_then_current() -> None:
    background, current = health_bar_commands(3, 5, Vector(530, 150), 100, 24)
    assert isinstance(background.source, Fill) and isinstance(current.source, Fill)
    assert (background.dest.x, background.dest.y) == (530, 150)
    assert background.dest.width == 100
    assert background.color == RED.with_alpha(0.5)
    assert current.dest.width == pytest.approx(60.0)
    assert current.color == RED
    assert current.dest.height == background.dest.height == 24


def test_current_never_exceeds_background() -> None:
    background, current = health_bar_commands(50, 5, Vector(0, 0))
    assert current.dest.width == background.dest.width
