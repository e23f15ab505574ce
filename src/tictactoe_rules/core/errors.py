"""
Error taxonomy for the rules engine.

PlacementError subclasses are ordinary caller errors: the game is left
untouched and the caller may retry with different input.

InconsistentStateError is not part of that family. It means outcome
detection found a board that legal play can never produce.
"""


class PlacementError(Exception):
    """Base class for rejected placements."""

    message = "placement rejected"

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"{self.message} at ({row}, {col})")


class OutOfBoundsError(PlacementError):
    """Coordinate outside the 3x3 grid."""


class RowOutOfBounds(OutOfBoundsError):
    message = "row out of bounds"


class ColOutOfBounds(OutOfBoundsError):
    message = "column out of bounds"


class GameConcluded(PlacementError):
    message = "game already concluded"


class PositionTaken(PlacementError):
    message = "position already taken"


class InconsistentStateError(RuntimeError):
    """Both players hold a winning line at once."""
