"""
Value types shared by the rules and the game state.

A board is a 3x3 grid of cells. Each cell is either None (empty) or the
Player whose mark it holds:

       col 0 | col 1 | col 2
    row 0  X |   O   |
    row 1    |   X   |
    row 2    |       |   O
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

BOARD_SIZE = 3


class Player(Enum):
    """The two players. X always moves first."""

    X = "X"
    O = "O"

    @property
    def opponent(self) -> "Player":
        """The player whose turn follows this one."""
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.value


Coordinate = Tuple[int, int]
Cell = Optional[Player]
Board = Tuple[Tuple[Cell, ...], ...]


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Status of a game after a placement.

    winner is set if and only if kind is WON. Use the in_progress(), won()
    and draw() constructors rather than building one by hand.
    """

    kind: OutcomeKind
    winner: Optional[Player] = None

    def __post_init__(self) -> None:
        """Validate the kind/winner pairing."""
        if self.kind is OutcomeKind.WON and self.winner is None:
            raise ValueError("A won outcome needs a winner")
        if self.kind is not OutcomeKind.WON and self.winner is not None:
            raise ValueError(f"Outcome {self.kind.value} cannot have a winner")

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> "Outcome":
        return cls(OutcomeKind.WON, player)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @property
    def is_concluded(self) -> bool:
        """True once the game is won or drawn."""
        return self.kind is not OutcomeKind.IN_PROGRESS

    def __str__(self) -> str:
        if self.kind is OutcomeKind.WON:
            return f"{self.winner} wins"
        if self.kind is OutcomeKind.DRAW:
            return "Draw"
        return "In progress"
