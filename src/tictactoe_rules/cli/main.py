"""
Main CLI for the tic-tac-toe rules engine.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..core import GameState, PlacementError
from ..core.types import Coordinate
from ..utils.rich_display import BoardDisplay, console, setup_rich_logging

QUIT_WORDS = {"q", "quit", "exit"}


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_move(text: str) -> Coordinate:
    """
    Parse a move typed as "row,col" or "row col".

    Range checking is left to GameState.place so the engine reports
    out-of-bounds coordinates itself.

    Args:
        text: Raw move text

    Returns:
        (row, col) tuple

    Raises:
        ValueError: If the text is not two integers
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'row col', got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Row and column must be integers, got {text!r}") from None


def play_command(args) -> int:
    """Play a hot-seat game in the terminal."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)

    state = GameState()
    display = BoardDisplay()
    display.show_header("Tic-Tac-Toe")

    while not state.is_concluded:
        display.show_board(state)
        try:
            text = console.input(f"[bold]{state.turn}[/bold] > ").strip()
        except EOFError:
            display.log("")
            logger.info("Input closed, abandoning game")
            return 0

        if text.lower() in QUIT_WORDS:
            display.log_info("Game abandoned")
            return 0

        try:
            row, col = parse_move(text)
            state.place(row, col)
        except ValueError as e:
            display.log_error(str(e))
        except PlacementError as e:
            display.show_error(e)

    display.show_board(state)
    display.show_outcome(state)
    return 0


def replay_command(args) -> int:
    """Apply a sequence of moves to a fresh game and report the result."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    state = GameState()
    display = BoardDisplay()

    for number, text in enumerate(args.moves, start=1):
        try:
            row, col = parse_move(text)
            outcome = state.place(row, col)
        except ValueError as e:
            display.log_error(f"Move {number}: {e}")
            return 2
        except PlacementError as e:
            display.show_board(state)
            display.log_error(f"Move {number}: {e}")
            return 2
        logger.info(f"Move {number}: ({row}, {col}) -> {outcome}")

    display.show_board(state)
    display.show_outcome(state)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe rules engine")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a two-player game in the terminal")
    play_parser.set_defaults(func=play_command)

    # Replay command
    replay_parser = subparsers.add_parser(
        "replay", help="Apply moves to a fresh game and print the result"
    )
    replay_parser.add_argument(
        "moves", nargs="+", metavar="MOVE", help="Move as 'row,col', X moves first"
    )
    replay_parser.set_defaults(func=replay_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
