"""glyph_rogue
=============

Glyph-based roguelike presentation core: deferred font loading, a shared
glyph atlas, and per-frame draw command generation for a tile map with
entities on top.

Typical headless use::

    from glyph_rogue import Game, HeadlessPlatform, run

    game = Game.new()
    platform = HeadlessPlatform(game.config.screen_size)
    run(game, platform, max_frames=60)
"""

from .config import GameConfig
from .deferred import AssetStatus, DeferredAsset
from .errors import GameInitError, TilesetLoadError
from .game import Game
from .lifecycle import HeadlessPlatform, Platform, run

__all__ = [
    "AssetStatus",
    "DeferredAsset",
    "Game",
    "GameConfig",
    "GameInitError",
    "HeadlessPlatform",
    "Platform",
    "TilesetLoadError",
    "run",
]
