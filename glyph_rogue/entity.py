"""Map tiles, entities and entity ID generation.

:class:`Tile` is a frozen value: the map is built in bulk and only ever
replaced as a whole. :class:`Entity` is mutable; the input controller and
future game logic update it in place.

IDs are *not* recycled; a simple incrementing counter is sufficient for a
single session.
"""

from dataclasses import dataclass
from typing import Iterator

from glyph_rogue.types import Color, EntityID, Vector


@dataclass(frozen=True)
class Tile:
    """Static map cell.

    Attributes:
        pos: Integral grid coordinate.
        glyph: Single character looked up in the glyph atlas.
        color: Tint applied when drawing.
    """

    pos: Vector
    glyph: str
    color: Color


@dataclass
class Entity:
    """Dynamic, mutable game object (monsters and the player).

    Attributes:
        pos: Grid coordinate; fractional values are allowed.
        glyph: Single character looked up in the glyph atlas.
        color: Tint applied when drawing.
        hp: Current hit points.
        max_hp: Maximum hit points.
    """

    pos: Vector
    glyph: str
    color: Color
    hp: int
    max_hp: int


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)
