from glyph_rogue.deferred import DeferredAsset
from glyph_rogue.renderer.draw import RegionSource
from glyph_rogue.renderer.surface import RecordingSurface
from glyph_rogue.renderer.tiles import WorldRenderer, render_world
from glyph_rogue.types import BLACK, BLUE, RED, Vector
from tests.test_utils import ManualExecutor, make_atlas, make_world

OFFSET = Vector(50, 150)
TILE = Vector(8, 8)


def test_tiles_then_entities_in_order() -> None:
    atlas = make_atlas("#@g.", TILE)
    world = make_world(
        tiles=[((0, 0), "#"), ((1, 0), "."), ((2, 0), "#")],
        others=[((2, 0), "g")],
        player_pos=(2, 0),
    )
    commands = render_world(atlas, world, OFFSET, TILE)
    glyph_at = {region: glyph for glyph, region in atlas.regions.items()}
    drawn = [glyph_at[c.source.region] for c in commands]  # type: ignore[union-attr]
    assert drawn == ["#", ".", "#", "g", "@"]
    assert [c.color for c in commands] == [BLACK, BLACK, BLACK, RED, BLUE]


def test_entity_drawn_last_at_shared_position() -> None:
    atlas = make_atlas("#@g.", TILE)
    world = make_world(tiles=[((3, 3), ".")], player_pos=(3, 3))
    commands = render_world(atlas, world, OFFSET, TILE)
    at_pos = [c for c in commands if (c.dest.x, c.dest.y) == (50 + 24, 150 + 24)]
    assert len(at_pos) == 2
    assert at_pos[-1].source.region == atlas.get("@")  # type: ignore[union-attr]


def test_screen_position_is_elementwise() -> None:
    atlas = make_atlas("#", Vector(10, 20))
    world = make_world(tiles=[((3, 2), "#")])
    command = render_world(atlas, world, OFFSET, Vector(10, 20))[0]
    assert (command.dest.x, command.dest.y) == (50 + 30, 150 + 40)
    assert (command.dest.width, command.dest.height) == (10, 20)


def test_regions_alias_atlas_image() -> None:
    atlas = make_atlas("#@", TILE)
    world = make_world(tiles=[((0, 0), "#"), ((1, 0), "#")])
    commands = render_world(atlas, world, OFFSET, TILE)
    for command in commands:
        assert isinstance(command.source, RegionSource)
        assert command.source.image is atlas.image


def test_unknown_glyph_skipped() -> None:
    atlas = make_atlas("#", TILE)
    world = make_world(tiles=[((0, 0), "?"), ((1, 0), "#")], others=[((0, 0), "g")])
    commands = render_world(atlas, world, OFFSET, TILE)
    assert len(commands) == 1


def test_fractional_entity_position() -> None:
    atlas = make_atlas("@", TILE)
    world = make_world(player_pos=(1.5, 0))
    (command,) = render_world(atlas, world, Vector(0, 0), TILE)
    assert command.dest.x == 12


def test_pending_atlas_draws_nothing() -> None:
    executor = ManualExecutor()
    asset = DeferredAsset(lambda: make_atlas("#@g.", TILE), executor=executor)
    world = make_world(tiles=[((0, 0), "#")])
    renderer = WorldRenderer(asset, OFFSET, TILE)
    surface = RecordingSurface()

    assert renderer.draw(surface, world) == 0
    assert surface.commands == []

    executor.run_all()
    assert renderer.draw(surface, world) == 2
    assert len(surface.commands) == 2
