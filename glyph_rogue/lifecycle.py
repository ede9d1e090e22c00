"""Platform boundary and the frame loop.

A :class:`Platform` supplies one input snapshot and one drawing surface per
frame. :func:`run` drives ``update`` then ``draw`` strictly in sequence and
stops once the game requests shutdown; the process is never terminated from
inside the core.

:class:`HeadlessPlatform` replays a scripted list of held-key sets and renders
every frame into a PIL image. It backs the command line runner and the tests.
"""

import logging
from typing import Iterable, List, Optional, Protocol, Sequence

from PIL import Image

from glyph_rogue.game import Game
from glyph_rogue.input import InputSnapshot, Key, KeyTracker
from glyph_rogue.renderer.surface import DrawingSurface, ImageSurface, TintCache
from glyph_rogue.types import Vector

logger = logging.getLogger(__name__)


class Platform(Protocol):
    def poll_input(self) -> InputSnapshot: ...

    def begin_frame(self) -> DrawingSurface: ...

    def end_frame(self, surface: DrawingSurface) -> None: ...


def run(game: Game, platform: Platform, max_frames: Optional[int] = None) -> int:
    """Run frames until shutdown is requested or ``max_frames`` is reached.

    Returns:
        int: Number of frames drawn.
    """
    frames = 0
    while max_frames is None or frames < max_frames:
        game.update(platform.poll_input())
        if game.shutdown_requested:
            break
        surface = platform.begin_frame()
        game.draw(surface)
        platform.end_frame(surface)
        frames += 1
    logger.info("Frame loop finished after %d frames", frames)
    return frames


class HeadlessPlatform:
    """Scripted input, PIL frames.

    Attributes:
        script: Keys held down on each frame; frames past the end hold nothing.
        frames: Rendered frames (only the last one when ``keep_frames`` is False).
    """

    script: List[frozenset[Key]]
    frames: List[Image.Image]

    def __init__(
        self,
        screen_size: Vector,
        script: Sequence[Iterable[Key]] = (),
        keep_frames: bool = False,
    ):
        self.screen_size = screen_size
        self.script = [frozenset(keys) for keys in script]
        self.frames = []
        self.keep_frames = keep_frames
        self._tracker = KeyTracker()
        self._tick = 0
        self._cache: TintCache = {}

    def poll_input(self) -> InputSnapshot:
        down = self.script[self._tick] if self._tick < len(self.script) else frozenset()
        self._tick += 1
        return self._tracker.snapshot(down)

    def begin_frame(self) -> ImageSurface:
        return ImageSurface(self.screen_size, cache=self._cache)

    def end_frame(self, surface: DrawingSurface) -> None:
        if not isinstance(surface, ImageSurface):
            raise TypeError(
                f"HeadlessPlatform renders ImageSurface frames, got {type(surface).__name__}"
            )
        if not self.keep_frames:
            self.frames.clear()
        self.frames.append(surface.image)

    @property
    def last_frame(self) -> Optional[Image.Image]:
        return self.frames[-1] if self.frames else None
