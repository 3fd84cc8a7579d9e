"""Tic-Tac-Toe constants."""

from enum import Enum, unique


@unique
class Marker(Enum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def other(self) -> "Marker":
        return Marker.O if self == Marker.X else Marker.X

    def __str__(self) -> str:
        return self.value


FIRST_TO_MOVE = Marker.X
SCORE_TO_WIN = 3
CENTER_SQUARE = 5
UNMARKED = " "

SQUARE_KEYS = tuple(range(1, 10))

WINNING_LINES = (
    # rows
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    # columns
    (1, 4, 7),
    (2, 5, 8),
    (3, 6, 9),
    # diagonals
    (1, 5, 9),
    (3, 5, 7),
)

COMPUTER_NAMES = ("R2D2", "C3PO", "BB8", "K2SO", "B2EMO")

# Lets the computer pick the human's marker at random
COMPUTER_CHOOSES = "C"
