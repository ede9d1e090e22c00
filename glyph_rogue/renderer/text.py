"""Placement of pre-rendered text images (title banner and credit lines)."""

from PIL import Image

from glyph_rogue.atlas import Region
from glyph_rogue.renderer.draw import DrawCommand, Rect, RegionSource
from glyph_rogue.types import WHITE, Vector


def image_command(image: Image.Image, top_left: Vector) -> DrawCommand:
    """Draw the whole ``image`` untinted with its top-left corner at ``top_left``."""
    region = Region(0, 0, image.width, image.height)
    return DrawCommand(
        dest=Rect.from_vectors(top_left, region.size),
        source=RegionSource(image, region),
        color=WHITE,
    )


def centered_command(image: Image.Image, center: Vector) -> DrawCommand:
    top_left = Vector(center.x - image.width / 2, center.y - image.height / 2)
    return image_command(image, top_left)
