"""Entry point: ``python -m glyph_rogue``.

Runs the game headless for a number of frames with scripted input and writes
the last frame as a PNG::

    python -m glyph_rogue --frames 10 --keys "left;;left;up" --out frame.png

A tileset that cannot be loaded ends the run with exit status 1.
"""

import argparse
import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from glyph_rogue.config import TEXT_FONT, TILESET_FONT, config_from_env
from glyph_rogue.deferred import InlineExecutor
from glyph_rogue.errors import TilesetLoadError
from glyph_rogue.game import Game
from glyph_rogue.input import Key
from glyph_rogue.lifecycle import HeadlessPlatform, run
from glyph_rogue.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_script(raw: str) -> List[frozenset[Key]]:
    """Parse ``"left;left+up;;exit"`` into per-frame sets of held keys."""
    if not raw:
        return []
    frames: List[frozenset[Key]] = []
    for token in raw.split(";"):
        names = [name.strip().lower() for name in token.split("+") if name.strip()]
        frames.append(frozenset(Key(name) for name in names))
    return frames


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Glyph roguelike headless runner")
    parser.add_argument("--frames", type=int, default=60)
    parser.add_argument(
        "--keys",
        type=str,
        default="",
        help="Held keys per frame, ';' between frames, '+' between keys "
        "(up, down, left, right, exit)",
    )
    parser.add_argument("--out", type=str, default=None, help="PNG path for the last frame")
    parser.add_argument("--asset-root", type=str, default=None)
    parser.add_argument("--tileset-font", type=str, default=None)
    parser.add_argument("--text-font", type=str, default=None)
    parser.add_argument(
        "--classic-fonts",
        action="store_true",
        help=f"Use {TILESET_FONT} and {TEXT_FONT} from the asset root",
    )
    parser.add_argument(
        "--sync", action="store_true", help="Load assets on the main thread before starting"
    )
    parser.add_argument(
        "--wait",
        type=float,
        default=5.0,
        help="Seconds to wait for background assets before the first frame",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"]
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        script = parse_script(args.keys)
    except ValueError as exc:
        logger.error("Invalid --keys: %s", exc)
        return 2

    overrides: Dict[str, str] = {}
    if args.classic_fonts:
        overrides.update(tileset_font=TILESET_FONT, text_font=TEXT_FONT)
    overrides.update(
        {
            name: value
            for name, value in (
                ("asset_root", args.asset_root),
                ("tileset_font", args.tileset_font),
                ("text_font", args.text_font),
            )
            if value is not None
        }
    )
    try:
        config = replace(config_from_env(), **overrides)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    game = Game.new(config, executor=InlineExecutor() if args.sync else None)

    for asset in game.assets:
        asset.wait(args.wait)

    platform = HeadlessPlatform(game.config.screen_size, script)
    try:
        run(game, platform, max_frames=args.frames)
    except TilesetLoadError as exc:
        logger.critical("%s", exc)
        return 1

    if args.out and platform.last_frame is not None:
        platform.last_frame.save(args.out)
        logger.info("Wrote %s", args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
