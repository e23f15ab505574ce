"""Core game state representation and rules."""

from .errors import (
    PlacementError,
    OutOfBoundsError,
    RowOutOfBounds,
    ColOutOfBounds,
    GameConcluded,
    PositionTaken,
    InconsistentStateError,
)
from .game_state import GameState, FIRST_PLAYER
from .rules import (
    WINNING_LINES,
    create_empty_board,
    is_within_bounds,
    has_winning_line,
    find_winning_line,
    is_full,
    legal_placements,
    evaluate_outcome,
)
from .types import BOARD_SIZE, Board, Cell, Coordinate, Outcome, OutcomeKind, Player

__all__ = [
    "GameState",
    "FIRST_PLAYER",
    "BOARD_SIZE",
    "Board",
    "Cell",
    "Coordinate",
    "Outcome",
    "OutcomeKind",
    "Player",
    "PlacementError",
    "OutOfBoundsError",
    "RowOutOfBounds",
    "ColOutOfBounds",
    "GameConcluded",
    "PositionTaken",
    "InconsistentStateError",
    "WINNING_LINES",
    "create_empty_board",
    "is_within_bounds",
    "has_winning_line",
    "find_winning_line",
    "is_full",
    "legal_placements",
    "evaluate_outcome",
]
