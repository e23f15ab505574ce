"""
Tic-tac-toe rules implementation.

Implements the standard 3x3 rules:
- A player wins by marking every cell of one of the 8 lines
- The game is drawn when the board fills without a winning line
- Both players holding a line at once cannot happen in legal play
"""

import logging
from typing import List, Optional, Tuple

from .errors import InconsistentStateError
from .types import BOARD_SIZE, Board, Coordinate, Outcome, Player

logger = logging.getLogger(__name__)

Line = Tuple[Coordinate, Coordinate, Coordinate]

# Forward diagonal, backward diagonal, rows, then columns
WINNING_LINES: Tuple[Line, ...] = (
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
    *(tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)),
    *(tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)),
)


def create_empty_board() -> Board:
    """
    Create the starting board.

    Returns:
        A 3x3 board with every cell empty
    """
    return tuple(tuple(None for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


def is_within_bounds(index: int) -> bool:
    """Check a row or column index against the grid."""
    return 0 <= index < BOARD_SIZE


def has_winning_line(board: Board, player: Player) -> bool:
    """
    Check whether a player has marked every cell of some line.

    Args:
        board: Board to inspect
        player: Player to check

    Returns:
        True if any of the 8 lines belongs entirely to player
    """
    return any(
        all(board[row][col] is player for row, col in line) for line in WINNING_LINES
    )


def find_winning_line(board: Board) -> Optional[Line]:
    """
    Find the first completed line, for highlighting.

    Args:
        board: Board to inspect

    Returns:
        The line's coordinates, or None if no line is complete
    """
    for line in WINNING_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        first = board[r0][c0]
        if first is not None and board[r1][c1] is first and board[r2][c2] is first:
            return line
    return None


def is_full(board: Board) -> bool:
    """Check if every cell holds a mark."""
    return all(cell is not None for row in board for cell in row)


def legal_placements(board: Board) -> List[Coordinate]:
    """
    List the empty cells in row-major order.

    Only vacancy is checked; whether the game has concluded is the
    caller's concern.

    Args:
        board: Board to inspect

    Returns:
        List of (row, col) coordinates that are still empty
    """
    return [
        (row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if board[row][col] is None
    ]


def evaluate_outcome(board: Board) -> Outcome:
    """
    Determine the outcome of a board.

    Resolution order:
    1. Both players hold a line: InconsistentStateError
    2. One player holds a line: that player wins
    3. Board is full: draw
    4. Otherwise the game is still in progress

    Args:
        board: Board to evaluate

    Returns:
        Outcome for the board

    Raises:
        InconsistentStateError: If both players have a winning line
    """
    x_wins = has_winning_line(board, Player.X)
    o_wins = has_winning_line(board, Player.O)

    if x_wins and o_wins:
        logger.critical("Invalid state: X and O both hold a winning line")
        raise InconsistentStateError("invalid state: X and O both hold a winning line")
    if x_wins:
        return Outcome.won(Player.X)
    if o_wins:
        return Outcome.won(Player.O)
    if is_full(board):
        return Outcome.draw()
    return Outcome.in_progress()
