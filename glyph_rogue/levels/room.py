"""Single bordered room with a fixed set of monsters.

This is the only level the game knows about: a rectangle of floor (``.``)
enclosed by walls (``#``). Tiles are emitted column by column (x outer, y
inner), which is also their draw order.
"""

from typing import List

from glyph_rogue.entity import Entity, Tile
from glyph_rogue.types import BLACK, BLUE, RED, Vector
from glyph_rogue.world import World

WALL = "#"
FLOOR = "."
PLAYER = "@"
GOBLIN = "g"

TILESET_GLYPHS = WALL + PLAYER + GOBLIN + FLOOR


def generate_map(width: int, height: int) -> List[Tile]:
    """Return ``width * height`` tiles with walls on the border."""
    tiles: List[Tile] = []
    for x in range(width):
        for y in range(height):
            border = x == 0 or x == width - 1 or y == 0 or y == height - 1
            tiles.append(Tile(pos=Vector(x, y), glyph=WALL if border else FLOOR, color=BLACK))
    return tiles


def generate_entities() -> List[Entity]:
    """Seed monsters; positions are fixed."""
    return [
        Entity(pos=Vector(9, 6), glyph=GOBLIN, color=RED, hp=1, max_hp=1),
        Entity(pos=Vector(2, 4), glyph=GOBLIN, color=RED, hp=1, max_hp=1),
    ]


def make_player() -> Entity:
    return Entity(pos=Vector(5, 3), glyph=PLAYER, color=BLUE, hp=3, max_hp=5)


def make_world(map_size: Vector) -> World:
    width, height = map_size.as_int()
    return World.create(
        map_size, generate_map(width, height), generate_entities(), make_player()
    )
