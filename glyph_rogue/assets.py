"""Asset source: fonts resolved by name and text rendered into images.

Fonts live under a single well-known root (``assets/fonts`` by default). The
special name :data:`BUILTIN_FONT` maps to Pillow's bundled default font so the
game can run without any font files installed.

Loading is exposed two ways: the blocking :meth:`AssetSource.load_font` and the
non-blocking :meth:`AssetSource.load_font_asset`, which reports failures as a
FAILED :class:`~glyph_rogue.deferred.DeferredAsset` instead of raising.
"""

import logging
import os
from concurrent.futures import Executor
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

from glyph_rogue.deferred import DeferredAsset
from glyph_rogue.errors import AssetLoadError, AssetNotFoundError
from glyph_rogue.types import BLACK, Color

logger = logging.getLogger(__name__)

DEFAULT_ASSET_ROOT = "assets/fonts"
BUILTIN_FONT = "<builtin>"

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class AssetSource:
    """Resolves fonts under ``asset_root``."""

    asset_root: str
    executor: Optional[Executor]

    def __init__(
        self, asset_root: str = DEFAULT_ASSET_ROOT, executor: Optional[Executor] = None
    ):
        self.asset_root = asset_root
        self.executor = executor

    def resolve(self, name: str) -> str:
        path = os.path.join(self.asset_root, name)
        if not os.path.isfile(path):
            raise AssetNotFoundError(f"Font '{name}' not found in '{self.asset_root}'")
        return path

    def load_font(self, name: str, size: float) -> Font:
        """Load ``name`` at pixel ``size``; raises :class:`AssetError` subclasses."""
        if name == BUILTIN_FONT:
            return ImageFont.load_default(size=size)
        path = self.resolve(name)
        try:
            font = ImageFont.truetype(path, int(size))
        except OSError as exc:
            raise AssetLoadError(f"Font '{name}' could not be read: {exc}") from exc
        logger.debug("Loaded font %s at size %s", path, size)
        return font

    def load_font_asset(self, name: str, size: float) -> DeferredAsset[Font]:
        return DeferredAsset(
            lambda: self.load_font(name, size),
            executor=self.executor,
            name=f"font:{name}@{size:g}",
        )

    def text_asset(
        self, font_name: str, text: str, size: float, color: Color = BLACK
    ) -> DeferredAsset[Image.Image]:
        """Load a font and render ``text`` with it, both in the background."""
        return self.load_font_asset(font_name, size).map(
            lambda font: render_text(font, text, color), name=f"text:{text[:24]}"
        )


def render_text(font: Font, text: str, color: Color = BLACK) -> Image.Image:
    """Render ``text`` into a transparent RGBA image tightly sized to it."""
    left, top, right, bottom = font.getbbox(text)
    width, height = max(1, int(right)), max(1, int(bottom))
    image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    ImageDraw.Draw(image).text((0, 0), text, font=font, fill=color.to_rgba8())
    return image
