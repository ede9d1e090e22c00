"""Game configuration.

``GameConfig`` is a frozen dataclass of defaults that reproduce the classic
layout: an 800x600 screen, a 20x15 room of 24px tiles drawn at (50, 150),
and a health bar to the right of the map. ``config_from_env`` overlays
``GLYPH_ROGUE_*`` environment variables on top of the defaults.

Both fonts default to Pillow's bundled font, which needs no files on disk but
is proportional, so tile glyphs are sliced only approximately. The classic
fonts (:data:`TILESET_FONT`, :data:`TEXT_FONT`) are used once they are placed
under ``asset_root`` and selected, e.g. ``GLYPH_ROGUE_TILESET_FONT=square.ttf``.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from glyph_rogue.assets import BUILTIN_FONT, DEFAULT_ASSET_ROOT
from glyph_rogue.levels.room import TILESET_GLYPHS
from glyph_rogue.types import Vector

ENV_PREFIX = "GLYPH_ROGUE_"

# The Mononoki font: https://madmalik.github.io/mononoki/ (SIL Open Font License 1.1)
TEXT_FONT = "mononoki-Regular.ttf"
# The Square font: http://strlen.com/square/ (CC BY 3.0)
TILESET_FONT = "square.ttf"


@dataclass(frozen=True)
class GameConfig:
    """All tunables for one game session.

    Attributes:
        title: Window title and banner text.
        screen_size: Frame size in pixels.
        map_size: Room size in tiles.
        tile_size: Tile size in pixels; the tileset font is loaded at its height.
        map_offset: Pixel position of the map's top-left tile.
        tileset_glyphs: Glyphs rasterized into the atlas, deduplicated.
        tileset_font: Monospaced font used for the atlas.
        text_font: Font for the title and credit lines.
        title_size: Banner font size.
        text_size: Credit line font size.
        credits: Credit lines drawn at the bottom of the screen.
        health_bar_width: Width of a full health bar in pixels.
        asset_root: Directory the fonts are resolved in.
    """

    title: str = "Glyph Rogue"
    screen_size: Vector = Vector(800, 600)
    map_size: Vector = Vector(20, 15)
    tile_size: Vector = Vector(24, 24)
    map_offset: Vector = Vector(50, 150)
    tileset_glyphs: str = TILESET_GLYPHS
    tileset_font: str = BUILTIN_FONT
    text_font: str = BUILTIN_FONT
    title_size: float = 72.0
    text_size: float = 20.0
    credits: tuple[str, ...] = (
        "Mononoki font by Matthias Tellen, terms: SIL Open Font License 1.1",
        "Square font by Wouter Van Oortmerssen, terms: CC BY 3.0",
    )
    health_bar_width: float = 100.0
    asset_root: str = DEFAULT_ASSET_ROOT

    def __post_init__(self) -> None:
        for name in ("screen_size", "map_size", "tile_size"):
            size: Vector = getattr(self, name)
            if size.x <= 0 or size.y <= 0:
                raise ValueError(f"{name} must be positive, got {size}")
        if not self.tileset_glyphs:
            raise ValueError("tileset_glyphs must not be empty")
        if self.health_bar_width < 0:
            raise ValueError("health_bar_width must not be negative")

    @property
    def map_size_px(self) -> Vector:
        return self.map_size.times(self.tile_size)

    def health_bar_position(self, map_size: Optional[Vector] = None) -> Vector:
        """Right edge of a map of ``map_size`` tiles, level with its top row."""
        width = (map_size or self.map_size).times(self.tile_size).x
        return self.map_offset + Vector(width, 0)


def _parse_vector(raw: str) -> Vector:
    x, _, y = raw.lower().partition("x")
    return Vector(float(x), float(y))


_PARSERS: Dict[str, Any] = {
    "title": str,
    "screen_size": _parse_vector,
    "map_size": _parse_vector,
    "tile_size": _parse_vector,
    "map_offset": _parse_vector,
    "tileset_glyphs": str,
    "tileset_font": str,
    "text_font": str,
    "title_size": float,
    "text_size": float,
    "health_bar_width": float,
    "asset_root": str,
}


def config_from_env(
    env: Optional[Mapping[str, str]] = None, base: Optional[GameConfig] = None
) -> GameConfig:
    """Overlay ``GLYPH_ROGUE_<FIELD>`` variables on ``base``.

    Vector fields are written ``WIDTHxHEIGHT`` (e.g. ``GLYPH_ROGUE_MAP_SIZE=30x20``).
    """
    env = os.environ if env is None else env
    overrides: Dict[str, Any] = {}
    for name, parse in _PARSERS.items():
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None:
            overrides[name] = parse(raw)
    return replace(base or GameConfig(), **overrides)
