"""Drawing surfaces: the boundary where draw commands become pixels.

:class:`ImageSurface` composites commands onto a PIL RGBA frame. Glyph
regions are cropped from the shared atlas bitmap at draw time and tinted;
tinted glyphs are cached per ``(image, region, color, size)`` so steady-state frames
do no per-glyph image processing.

:class:`RecordingSurface` only records commands and is used for inspection.
"""

from typing import Dict, List, Optional, Protocol, Tuple

from PIL import Image

from glyph_rogue.atlas import Region
from glyph_rogue.renderer.draw import DrawCommand, Fill, RegionSource
from glyph_rogue.types import WHITE, Color, Vector
from glyph_rogue.utils.image import tint_image

TintKey = Tuple[int, Region, Color, Tuple[int, int]]
# Entries keep their source image alive so its id cannot be reused while cached.
TintCache = Dict[TintKey, Tuple[Image.Image, Image.Image]]


class DrawingSurface(Protocol):
    size: Vector

    def clear(self, color: Color) -> None: ...

    def draw(self, command: DrawCommand) -> None: ...


class RecordingSurface:
    """Surface that keeps every command it receives, in order."""

    size: Vector
    commands: List[DrawCommand]
    clear_color: Color

    def __init__(self, size: Vector = Vector(800, 600)):
        self.size = size
        self.commands = []
        self.clear_color = WHITE

    def clear(self, color: Color) -> None:
        self.clear_color = color
        self.commands = []

    def draw(self, command: DrawCommand) -> None:
        self.commands.append(command)


class ImageSurface:
    """Surface that renders into a PIL RGBA image.

    ``cache`` may be shared between surfaces (one per frame) so that tinted
    glyphs survive across frames.
    """

    size: Vector
    image: Image.Image
    cache: TintCache

    def __init__(self, size: Vector, cache: Optional[TintCache] = None):
        self.size = size
        self.image = Image.new("RGBA", size.as_int(), WHITE.to_rgba8())
        self.cache = cache if cache is not None else {}

    def clear(self, color: Color) -> None:
        self.image = Image.new("RGBA", self.size.as_int(), color.to_rgba8())

    def draw(self, command: DrawCommand) -> None:
        width, height = int(round(command.dest.width)), int(round(command.dest.height))
        if width <= 0 or height <= 0:
            return
        if isinstance(command.source, Fill):
            layer = Image.new("RGBA", (width, height), command.color.to_rgba8())
        else:
            layer = self._tinted(command.source, command.color, (width, height))
        self._composite(layer, command.dest.pos.as_int())

    def _tinted(
        self, source: RegionSource, color: Color, size: Tuple[int, int]
    ) -> Image.Image:
        key = (id(source.image), source.region, color, size)
        cached = self.cache.get(key)
        if cached is not None and cached[0] is source.image:
            return cached[1]
        glyph = source.image.crop(source.region.box)
        if glyph.size != size:
            glyph = glyph.resize(size)
        tinted = tint_image(glyph, color)
        self.cache[key] = (source.image, tinted)
        return tinted

    def _composite(self, layer: Image.Image, dest: Tuple[int, int]) -> None:
        # alpha_composite rejects negative offsets, so clip the layer first.
        x, y = dest
        left, top = max(0, -x), max(0, -y)
        if left >= layer.width or top >= layer.height:
            return
        if left or top:
            layer = layer.crop((left, top, layer.width, layer.height))
        x, y = x + left, y + top
        if x >= self.image.width or y >= self.image.height:
            return
        self.image.alpha_composite(layer, (x, y))
