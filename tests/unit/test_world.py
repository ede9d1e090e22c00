from collections import Counter

import pytest

from glyph_rogue.entity import Entity
from glyph_rogue.levels import generate_entities, generate_map, make_world
from glyph_rogue.levels.room import FLOOR, WALL
from glyph_rogue.types import RED, Vector
from tests.test_utils import make_world as make_small_world


def test_generate_map_border_and_interior_counts() -> None:
    tiles = generate_map(20, 15)
    counts = Counter(tile.glyph for tile in tiles)
    assert len(tiles) == 300
    assert counts[WALL] == 2 * (20 + 15) - 4 == 66
    assert counts[FLOOR] == 20 * 15 - 66 == 234


def test_generate_map_walls_on_edges_only() -> None:
    for tile in generate_map(6, 4):
        x, y = tile.pos.as_int()
        on_edge = x in (0, 5) or y in (0, 3)
        assert (tile.glyph == WALL) == on_edge


def test_generate_map_is_column_major() -> None:
    tiles = generate_map(3, 2)
    assert [tile.pos.as_int() for tile in tiles] == [
        (0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1),
    ]


def test_make_world_player_is_last_entity() -> None:
    world = make_world(Vector(20, 15))
    assert len(world.entities) == len(generate_entities()) + 1
    assert list(world.entities)[-1] == world.player_id
    assert world.player.glyph == "@"
    assert (world.player.hp, world.player.max_hp) == (3, 5)
    assert world.player.pos == Vector(5, 3)


def test_player_handle_survives_removal_of_others() -> None:
    world = make_small_world(others=[((0, 0), "g"), ((1, 0), "g")])
    player = world.player
    for eid in [eid for eid in world.entities if eid != world.player_id]:
        world.remove_entity(eid)
    assert world.player is player
    assert len(world.entities) == 1


def test_cannot_remove_player() -> None:
    world = make_small_world()
    with pytest.raises(ValueError):
        world.remove_entity(world.player_id)
    assert world.player.glyph == "@"


def test_set_player_validates_handle() -> None:
    world = make_small_world()
    with pytest.raises(KeyError):
        world.set_player(-1)
    eid = world.add_entity(Entity(pos=Vector(2, 2), glyph="g", color=RED, hp=1, max_hp=1))
    world.set_player(eid)
    assert world.player.glyph == "g"


def test_replace_map_swaps_all_tiles() -> None:
    world = make_small_world(tiles=[((0, 0), "#")])
    world.replace_map(generate_map(3, 3))
    assert len(world.tiles) == 9
