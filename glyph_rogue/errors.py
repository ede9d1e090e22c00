"""Exception hierarchy.

Only :class:`TilesetLoadError` is allowed to end the process; every other
failure is absorbed by the component that detects it.
"""

from typing import Optional


class AssetError(Exception):
    """Base class for asset source failures."""


class AssetNotFoundError(AssetError):
    """The named resource does not exist under the asset root."""


class AssetLoadError(AssetError):
    """The resource exists but could not be decoded or rendered."""


class TilesetLoadError(RuntimeError):
    """The glyph atlas could not be built; the game cannot be played."""

    def __init__(self, resource: str, cause: Optional[BaseException] = None):
        self.resource = resource
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Could not build the tileset from font '{resource}'{detail}")


class GameInitError(Exception):
    """Raised by ``Game.new`` when the component graph cannot be constructed."""
