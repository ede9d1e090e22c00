"""Keyboard input: per-frame snapshots and the player controller.

The platform reports which logical keys are *down* each frame. A
:class:`KeyTracker` turns that level signal into an explicit
:class:`InputSnapshot` carrying both the held keys and the keys that went down
this frame, so holding a key moves the player once, not once per frame.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Dict, FrozenSet, Iterable, Tuple

from glyph_rogue.types import Vector
from glyph_rogue.world import World

logger = logging.getLogger(__name__)


class Key(StrEnum):
    """Logical keys the game reads."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    EXIT = auto()


MOVE_KEYS = [Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT]

DIRECTIONS: Dict[Key, Tuple[int, int]] = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class InputSnapshot:
    """Key state for one frame.

    Attributes:
        pressed: Keys that went down since the previous frame (edge).
        held: Keys currently down (level).
    """

    pressed: FrozenSet[Key] = field(default_factory=frozenset)
    held: FrozenSet[Key] = field(default_factory=frozenset)

    def just_pressed(self, key: Key) -> bool:
        return key in self.pressed

    def is_down(self, key: Key) -> bool:
        return key in self.held or key in self.pressed

    @classmethod
    def press(cls, *keys: Key) -> "InputSnapshot":
        """Snapshot for keys that were pressed and released within one frame."""
        return cls(pressed=frozenset(keys))


EMPTY_INPUT = InputSnapshot()


class KeyTracker:
    """Derives edge-triggered presses from successive sets of held keys."""

    def __init__(self) -> None:
        self._down: FrozenSet[Key] = frozenset()

    def snapshot(self, down: Iterable[Key]) -> InputSnapshot:
        current = frozenset(down)
        pressed = current - self._down
        self._down = current
        return InputSnapshot(pressed=pressed, held=current)


class InputController:
    """Applies a frame's input to the world.

    Movement is not validated against map bounds or walls; the player can walk
    through anything. The exit key requests shutdown immediately, without
    confirmation.
    """

    def update(self, world: World, snapshot: InputSnapshot) -> bool:
        """Move the player for newly pressed keys; return True to request exit."""
        player = world.player
        for key in MOVE_KEYS:
            if snapshot.just_pressed(key):
                dx, dy = DIRECTIONS[key]
                player.pos = player.pos + Vector(dx, dy)
                logger.debug("Player moved %s to %s", key, player.pos)
        return snapshot.is_down(Key.EXIT)
