"""Rendering: draw primitives, surfaces and the per-frame passes.

Passes produce :class:`~glyph_rogue.renderer.draw.DrawCommand` lists; a
:class:`~glyph_rogue.renderer.surface.DrawingSurface` turns them into pixels.
"""

from .draw import DrawCommand, Fill, Rect, RegionSource
from .health_bar import health_bar_commands, health_bar_width
from .surface import DrawingSurface, ImageSurface, RecordingSurface
from .tiles import WorldRenderer, render_world

__all__ = [
    "DrawCommand",
    "DrawingSurface",
    "Fill",
    "ImageSurface",
    "Rect",
    "RecordingSurface",
    "RegionSource",
    "WorldRenderer",
    "health_bar_commands",
    "health_bar_width",
    "render_world",
]
