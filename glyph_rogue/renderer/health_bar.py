"""Player health bar: a translucent full-width bar under an opaque current bar."""

from typing import List

from glyph_rogue.renderer.draw import DrawCommand, Fill, Rect
from glyph_rogue.types import RED, Color, Vector

DEFAULT_BAR_WIDTH = 100.0
BACKGROUND_ALPHA = 0.5


def health_bar_width(hp: float, max_hp: float, bar_width: float) -> float:
    """Filled width for ``hp`` out of ``max_hp``.

    The ratio is clamped to ``[0, 1]``; a zero maximum yields an empty bar.
    """
    if max_hp <= 0:
        return 0.0
    ratio = min(1.0, max(0.0, hp / max_hp))
    return ratio * bar_width


def health_bar_commands(
    hp: float,
    max_hp: float,
    position: Vector,
    bar_width: float = DEFAULT_BAR_WIDTH,
    height: float = 24.0,
    color: Color = RED,
) -> List[DrawCommand]:
    """Background bar first, then the current-health bar on top."""
    current = health_bar_width(hp, max_hp, bar_width)
    return [
        DrawCommand(
            dest=Rect(position.x, position.y, bar_width, height),
            source=Fill(),
            color=color.with_alpha(BACKGROUND_ALPHA),
        ),
        DrawCommand(
            dest=Rect(position.x, position.y, current, height),
            source=Fill(),
            color=color,
        ),
    ]
