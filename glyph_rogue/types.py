"""Common value types and aliases.

``Vector`` is the single coordinate type used for grid positions, pixel
offsets and sizes. Grid positions of tiles are integral; entity positions may
be fractional to leave room for sub-tile movement. ``Color`` stores RGBA as
floats in ``[0, 1]`` and converts to 8-bit tuples for PIL.
"""

from dataclasses import dataclass
from typing import Tuple


EntityID = int

RGBA8 = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Vector:
    """2D vector.

    Attributes:
        x: Horizontal component (column / pixels, grows to the right).
        y: Vertical component (row / pixels, grows downward).
    """

    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def times(self, other: "Vector") -> "Vector":
        """Element-wise product (scale each axis independently)."""
        return Vector(self.x * other.x, self.y * other.y)

    def as_int(self) -> Tuple[int, int]:
        return int(round(self.x)), int(round(self.y))


def _to_byte(value: float) -> int:
    return max(0, min(255, int(round(value * 255))))


@dataclass(frozen=True)
class Color:
    """RGBA color with float channels in ``[0, 1]``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.r, self.g, self.b, alpha)

    def to_rgba8(self) -> RGBA8:
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a))

    @classmethod
    def from_rgba8(cls, rgba: RGBA8) -> "Color":
        r, g, b, a = rgba
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
