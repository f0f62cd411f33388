from __future__ import annotations

import argparse
import curses
import logging
import logging.handlers
import sys
from typing import List, Optional

from termsnake.board import GameOverReport
from termsnake.config import for_mode
from termsnake.loop import GameLoop
from termsnake.terminal import CursesTerminal

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake in the terminal")
    parser.add_argument(
        "mode",
        nargs="?",
        default=None,
        help="Any value (e.g. 'm') starts a two-player game",
    )
    return parser.parse_args(argv)


def configure_logging() -> logging.handlers.MemoryHandler:
    """Buffer log records while curses owns the screen; close() flushes them to stderr."""
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(logging.Formatter(LOG_FORMAT))
    buffered = logging.handlers.MemoryHandler(
        capacity=1000,
        flushLevel=logging.CRITICAL + 1,
        target=stream,
    )
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    root.addHandler(buffered)
    return buffered


def run_game(stdscr, multiplayer: bool) -> Optional[GameOverReport]:
    config = for_mode(multiplayer)
    loop = GameLoop(config, CursesTerminal(stdscr))
    return loop.run()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    buffered = configure_logging()
    try:
        report = curses.wrapper(run_game, args.mode is not None)
    finally:
        logging.getLogger().removeHandler(buffered)
        buffered.close()

    if report is None:
        sys.exit(0)

    print()
    for line in report.lines():
        print(line)


if __name__ == "__main__":
    main()
