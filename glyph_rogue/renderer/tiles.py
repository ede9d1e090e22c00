"""Tile and entity pass: turn the world into atlas draw commands.

Ordering is the only layering mechanism: every tile is emitted before any
entity, and entities are emitted in collection order, so an entity always
covers the tile beneath it and later entities cover earlier ones. There is no
depth buffer; floor dots can show through glyphs that do not fully cover them.
"""

from typing import Iterable, List, Optional, Tuple

from glyph_rogue.atlas import GlyphAtlas, check_tileset
from glyph_rogue.deferred import DeferredAsset
from glyph_rogue.renderer.draw import DrawCommand, Rect, RegionSource
from glyph_rogue.renderer.surface import DrawingSurface
from glyph_rogue.types import Color, Vector
from glyph_rogue.world import World

Drawable = Tuple[Vector, str, Color]


def _glyph_commands(
    atlas: GlyphAtlas, drawables: Iterable[Drawable], offset: Vector, tile_size: Vector
) -> List[DrawCommand]:
    commands: List[DrawCommand] = []
    for pos, glyph, color in drawables:
        region = atlas.get(glyph)
        if region is None:
            continue
        pos_px = offset + pos.times(tile_size)
        commands.append(
            DrawCommand(
                dest=Rect.from_vectors(pos_px, region.size),
                source=RegionSource(atlas.image, region),
                color=color,
            )
        )
    return commands


def render_world(
    atlas: GlyphAtlas, world: World, offset: Vector, tile_size: Vector
) -> List[DrawCommand]:
    """Draw commands for all tiles (map order) followed by all entities.

    Glyphs missing from the atlas are skipped.
    """
    tiles = ((tile.pos, tile.glyph, tile.color) for tile in world.tiles)
    entities = ((e.pos, e.glyph, e.color) for e in world.iter_entities())
    return _glyph_commands(atlas, tiles, offset, tile_size) + _glyph_commands(
        atlas, entities, offset, tile_size
    )


class WorldRenderer:
    """Draws the world through a deferred atlas.

    While the atlas is pending nothing is drawn. A failed atlas raises
    :class:`~glyph_rogue.errors.TilesetLoadError`.
    """

    atlas: DeferredAsset[GlyphAtlas]
    offset: Vector
    tile_size: Vector
    resource: str

    def __init__(
        self,
        atlas: DeferredAsset[GlyphAtlas],
        offset: Vector,
        tile_size: Vector,
        resource: Optional[str] = None,
    ):
        self.atlas = atlas
        self.offset = offset
        self.tile_size = tile_size
        self.resource = resource or atlas.name

    def commands(self, world: World) -> List[DrawCommand]:
        commands: List[DrawCommand] = []
        self.atlas.execute(
            lambda atlas: commands.extend(
                render_world(atlas, world, self.offset, self.tile_size)
            )
        )
        return commands

    def draw(self, surface: DrawingSurface, world: World) -> int:
        """Emit the world onto ``surface``; returns the number of commands."""
        check_tileset(self.atlas, self.resource)
        commands = self.commands(world)
        for command in commands:
            surface.draw(command)
        return len(commands)
