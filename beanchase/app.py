"""Command-line entry point that opens the game window."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import MAP_FILES, Settings
from .engine import Game
from .resources import load_resources
from .scene_menu import MenuScene

log = logging.getLogger("beanchase")


def build_parser() -> argparse.ArgumentParser:
    """The command-line parser."""
    parser = argparse.ArgumentParser(
        prog="beanchase", description="Eat every bean on the maze while avoiding the ghosts."
    )
    parser.add_argument(
        "--assets", default="Assets", help="directory holding images, fonts, music and maps"
    )
    parser.add_argument(
        "--map", type=int, choices=range(len(MAP_FILES)), default=0,
        help="number of the map selected at start",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log to the console")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def _configure_logging(verbose: bool, log_file: str | None) -> None:
    handlers: list[logging.Handler] = []
    if verbose:
        handlers.append(logging.StreamHandler())
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w"))
    log.setLevel(logging.INFO if handlers else logging.WARNING)
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """Run the game; returns the process exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.log_file)
    settings = Settings(assets_dir=Path(args.assets), map_selection=args.map)
    try:
        resources = load_resources(args.assets)
        game = Game(settings, resources)
        game.change_scene(MenuScene(game))
    except (OSError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    log.info("Game initialized")
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())