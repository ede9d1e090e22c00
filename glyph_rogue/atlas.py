"""Glyph atlas: one shared bitmap sliced into fixed-size glyph regions.

The whole glyph string is rasterized in a single draw call into an image of
``(N * w, h)``. Glyph ``i`` then owns the rectangle at ``(i * w, 0)`` of size
``(w, h)``. Regions are plain descriptors into the backing image; nothing is
copied per glyph and the atlas owns the only bitmap.

Precondition: the font must be monospaced at the requested size. The builder
cannot verify this from the font alone; a proportional font yields regions
that cut glyphs in the wrong places.

Glyphs are drawn in white so they can be tinted at draw time.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from PIL import Image, ImageDraw
from pyrsistent import PMap, pmap

from glyph_rogue.assets import AssetSource, Font
from glyph_rogue.deferred import DeferredAsset
from glyph_rogue.errors import TilesetLoadError
from glyph_rogue.types import WHITE, Vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """Rectangle inside the atlas bitmap (pixels)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """PIL crop box ``(left, upper, right, lower)``."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def size(self) -> Vector:
        return Vector(self.width, self.height)


@dataclass(frozen=True)
class GlyphAtlas:
    """Immutable mapping from glyph to region of a single backing image.

    Attributes:
        image: Backing RGBA bitmap shared by every region. Must not be mutated.
        regions: Glyph to region descriptor.
        tile_size: Uniform region size in pixels.
        glyphs: Mapped glyphs in bitmap slot order (``regions`` is unordered).
    """

    image: Image.Image
    regions: PMap[str, Region]
    tile_size: Vector
    glyphs: Tuple[str, ...]

    def get(self, glyph: str) -> Optional[Region]:
        return self.regions.get(glyph)

    def __contains__(self, glyph: object) -> bool:
        return glyph in self.regions

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self) -> Iterator[str]:
        return iter(self.glyphs)


def dedupe_glyphs(glyphs: Iterable[str]) -> str:
    """Drop repeated glyphs, keeping first-occurrence order."""
    return "".join(dict.fromkeys(glyphs))


def build_glyph_atlas(font: Font, glyphs: Sequence[str], tile_size: Vector) -> GlyphAtlas:
    """Rasterize ``glyphs`` once and slice the result into regions.

    Repeated glyphs are not rejected: a later occurrence overwrites the earlier
    mapping and leaves its slot unused. Deduplicate with :func:`dedupe_glyphs`
    first to avoid wasted space.
    """
    text = "".join(glyphs)
    tile_w, tile_h = int(tile_size.x), int(tile_size.y)
    if tile_w <= 0 or tile_h <= 0:
        raise ValueError(f"Tile size must be positive, got {tile_size}")

    image = Image.new("RGBA", (max(1, len(text) * tile_w), tile_h), (0, 0, 0, 0))
    ImageDraw.Draw(image).text((0, 0), text, font=font, fill=WHITE.to_rgba8())

    evolver = pmap().evolver()
    for index, glyph in enumerate(text):
        evolver[glyph] = Region(index * tile_w, 0, tile_w, tile_h)
    regions = evolver.persistent()
    atlas = GlyphAtlas(
        image=image,
        regions=regions,
        tile_size=tile_size,
        glyphs=tuple(sorted(regions, key=lambda glyph: regions[glyph].x)),
    )
    logger.info("Built glyph atlas with %d glyphs (%dx%d)", len(atlas), *image.size)
    return atlas


def load_atlas_asset(
    source: AssetSource, font_name: str, glyphs: Sequence[str], tile_size: Vector
) -> DeferredAsset[GlyphAtlas]:
    """Load the tileset font in the background and build the atlas from it.

    The font is loaded at the tile height.
    """
    return source.load_font_asset(font_name, tile_size.y).map(
        lambda font: build_glyph_atlas(font, glyphs, tile_size),
        name=f"tileset:{font_name}",
    )


def check_tileset(asset: DeferredAsset[GlyphAtlas], resource: str) -> None:
    """Raise :class:`TilesetLoadError` if the tileset asset has failed.

    Unlike every other asset, a missing tileset leaves nothing playable, so
    this failure is escalated instead of degrading silently.
    """
    if asset.is_failed:
        raise TilesetLoadError(resource, asset.error)
