"""Draw primitives handed to a drawing surface.

Each :class:`DrawCommand` is ``(destination rectangle, source, color)`` where
the source is either a region of a shared image (tinted by ``color``) or a
solid :class:`Fill` in ``color``.
"""

from dataclasses import dataclass
from typing import Union

from PIL import Image

from glyph_rogue.atlas import Region
from glyph_rogue.types import Color, Vector


@dataclass(frozen=True)
class Rect:
    """Screen rectangle in pixels."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_vectors(cls, pos: Vector, size: Vector) -> "Rect":
        return cls(pos.x, pos.y, size.x, size.y)

    @property
    def pos(self) -> Vector:
        return Vector(self.x, self.y)


@dataclass(frozen=True)
class RegionSource:
    """Borrowed view of ``region`` inside ``image`` (no pixels are copied)."""

    image: Image.Image
    region: Region


@dataclass(frozen=True)
class Fill:
    """Solid color fill."""


Source = Union[RegionSource, Fill]


@dataclass(frozen=True)
class DrawCommand:
    dest: Rect
    source: Source
    color: Color
