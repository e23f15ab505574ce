"""
Game state for a single tic-tac-toe match.

A GameState owns:
- The 3x3 board
- Whose turn it is
- The current outcome

The only way to change it is place(). Every accessor returns an immutable
view, so renderers and other collaborators can read the game freely.
"""

import logging
from typing import List, NoReturn

from . import rules
from .errors import (
    ColOutOfBounds,
    GameConcluded,
    PositionTaken,
    RowOutOfBounds,
)
from .types import BOARD_SIZE, Board, Cell, Outcome, Player

logger = logging.getLogger(__name__)

FIRST_PLAYER = Player.X


class GameState:
    """
    Mutable state machine for one game.

    Starts with an empty board, X to move and the game in progress.
    Instances share nothing, so independent games need independent
    instances. There is no internal locking.
    """

    def __init__(self) -> None:
        self._board: List[List[Cell]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self._turn = FIRST_PLAYER
        self._outcome = Outcome.in_progress()
        self._move_count = 0

    @property
    def board(self) -> Board:
        """Snapshot of the board as a tuple of rows."""
        return tuple(tuple(row) for row in self._board)

    @property
    def turn(self) -> Player:
        """Player allowed to make the next placement."""
        return self._turn

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_concluded(self) -> bool:
        return self._outcome.is_concluded

    @property
    def move_count(self) -> int:
        """Number of successful placements so far."""
        return self._move_count

    def place(self, row: int, col: int) -> Outcome:
        """
        Mark a cell for the current player.

        Checks run in this order and the first failure wins:
        1. row inside the grid
        2. col inside the grid
        3. game still in progress
        4. cell still empty

        On success the cell is marked, the turn passes to the other player
        and the outcome is recomputed. A failed placement changes nothing.

        Args:
            row: Row index (0-2)
            col: Column index (0-2)

        Returns:
            Outcome after the placement

        Raises:
            RowOutOfBounds: row is outside the grid
            ColOutOfBounds: col is outside the grid
            GameConcluded: the game has already been won or drawn
            PositionTaken: the cell is already marked
            InconsistentStateError: outcome detection found two winners
        """
        if not rules.is_within_bounds(row):
            self._reject(RowOutOfBounds(row, col))
        if not rules.is_within_bounds(col):
            self._reject(ColOutOfBounds(row, col))
        if self._outcome.is_concluded:
            self._reject(GameConcluded(row, col))
        if self._board[row][col] is not None:
            self._reject(PositionTaken(row, col))

        player = self._turn
        self._board[row][col] = player
        self._turn = player.opponent
        self._move_count += 1
        logger.debug(f"{player} placed at ({row}, {col}), move {self._move_count}")

        self._outcome = rules.evaluate_outcome(self.board)
        if self._outcome.is_concluded:
            logger.info(f"Game concluded after {self._move_count} moves: {self._outcome}")

        return self._outcome

    def _reject(self, error: Exception) -> NoReturn:
        logger.debug(f"Rejected placement: {error}")
        raise error

    def __str__(self) -> str:
        """Human-readable board representation."""
        rows = [
            " | ".join(str(cell) if cell is not None else " " for cell in row)
            for row in self._board
        ]
        separator = "\n" + "-" * 9 + "\n"
        board_str = separator.join(rows)

        if self._outcome.is_concluded:
            status = str(self._outcome)
        else:
            status = f"Player {self._turn}'s turn"
        return f"{board_str}\n\n{status}\n"

    def __repr__(self) -> str:
        return (
            f"GameState(turn={self._turn}, outcome={self._outcome}, "
            f"move_count={self._move_count})"
        )
