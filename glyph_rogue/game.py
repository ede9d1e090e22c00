"""The game: component graph plus the update / draw hooks.

A platform host drives it strictly sequentially, once per frame::

    game = Game.new(config)
    while not game.shutdown_requested:
        game.update(snapshot)
        game.draw(surface)

Per frame, ``update`` lets the input controller mutate the world; ``draw``
clears the surface, places the title and credit lines (if their fonts have
loaded), draws tiles then entities through the glyph atlas, and finally the
player's health bar.

Only the tileset is critical: if it fails to load, ``draw`` raises
:class:`~glyph_rogue.errors.TilesetLoadError`. Title and credit failures just
leave the text out.
"""

import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from typing import List, Mapping, Optional

from PIL import Image

from glyph_rogue.assets import AssetSource
from glyph_rogue.atlas import GlyphAtlas, dedupe_glyphs, load_atlas_asset
from glyph_rogue.config import GameConfig, config_from_env
from glyph_rogue.deferred import AssetStatus, DeferredAsset
from glyph_rogue.errors import GameInitError
from glyph_rogue.input import InputController, InputSnapshot
from glyph_rogue.levels.room import make_world
from glyph_rogue.renderer.health_bar import health_bar_commands
from glyph_rogue.renderer.surface import DrawingSurface
from glyph_rogue.renderer.text import centered_command, image_command
from glyph_rogue.renderer.tiles import WorldRenderer
from glyph_rogue.types import BLACK, WHITE, Vector
from glyph_rogue.world import World

logger = logging.getLogger(__name__)

TITLE_CENTER_Y = 40
CREDIT_MARGIN_X = 2
CREDIT_LINE_STEP = 30


@dataclass
class Game:
    config: GameConfig
    world: World
    tileset: DeferredAsset[GlyphAtlas]
    title: DeferredAsset[Image.Image]
    credits: List[DeferredAsset[Image.Image]]
    renderer: WorldRenderer
    controller: InputController
    shutdown_requested: bool = False

    @classmethod
    def new(
        cls,
        config: Optional[GameConfig] = None,
        source: Optional[AssetSource] = None,
        executor: Optional[Executor] = None,
        world: Optional[World] = None,
    ) -> "Game":
        """Build the component graph and start loading assets in the background."""
        config = config or GameConfig()
        if source is None:
            source = AssetSource(config.asset_root, executor=executor)

        tileset = load_atlas_asset(
            source,
            config.tileset_font,
            dedupe_glyphs(config.tileset_glyphs),
            config.tile_size,
        )
        title = source.text_asset(config.text_font, config.title, config.title_size, BLACK)
        credits = [
            source.text_asset(config.text_font, line, config.text_size, BLACK)
            for line in config.credits
        ]
        if world is None:
            world = make_world(config.map_size)
        logger.info(
            "Game initialized: %d tiles, %d entities",
            len(world.tiles),
            len(world.entities),
        )
        return cls(
            config=config,
            world=world,
            tileset=tileset,
            title=title,
            credits=credits,
            renderer=WorldRenderer(
                tileset, config.map_offset, config.tile_size, resource=config.tileset_font
            ),
            controller=InputController(),
        )

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        base: Optional[GameConfig] = None,
        executor: Optional[Executor] = None,
    ) -> "Game":
        """Like :meth:`new` with configuration read from ``GLYPH_ROGUE_*`` variables.

        Raises:
            GameInitError: If a variable cannot be parsed or the result is invalid.
        """
        try:
            config = config_from_env(env, base)
        except ValueError as exc:
            raise GameInitError(f"Invalid configuration: {exc}") from exc
        return cls.new(config, executor=executor)

    @property
    def assets(self) -> List[DeferredAsset]:
        return [self.tileset, self.title, *self.credits]

    def is_loading(self) -> bool:
        """True while any asset is still pending; the host should schedule another frame."""
        return any(asset.poll() is AssetStatus.PENDING for asset in self.assets)

    def update(self, snapshot: InputSnapshot) -> None:
        if self.controller.update(self.world, snapshot):
            if not self.shutdown_requested:
                logger.info("Exit requested")
            self.shutdown_requested = True

    def draw(self, surface: DrawingSurface) -> None:
        surface.clear(WHITE)
        self._draw_text(surface)
        self.renderer.draw(surface, self.world)
        self._draw_health_bar(surface)

    def _draw_text(self, surface: DrawingSurface) -> None:
        screen = self.config.screen_size
        self.title.execute(
            lambda image: surface.draw(
                centered_command(image, Vector(screen.x // 2, TITLE_CENTER_Y))
            )
        )
        lines = len(self.credits)
        for index, credit in enumerate(self.credits):
            y = screen.y - CREDIT_LINE_STEP * (lines - index)
            credit.execute(
                lambda image, y=y: surface.draw(
                    image_command(image, Vector(CREDIT_MARGIN_X, y))
                )
            )

    def _draw_health_bar(self, surface: DrawingSurface) -> None:
        player = self.world.player
        for command in health_bar_commands(
            player.hp,
            player.max_hp,
            self.config.health_bar_position(self.world.size),
            bar_width=self.config.health_bar_width,
            height=self.config.tile_size.y,
        ):
            surface.draw(command)
