"""
This module defines the `Square` and `Board` classes of Tic-Tac-Toe.

The board maps positions 1 to 9, numbered left to right and top to bottom,
to squares. It knows the eight winning lines and answers the questions a
match needs: who won, whether the board is full, and which squares are open.
"""

from typing import Dict, List, Optional

from parlor.tictactoe.constants import SQUARE_KEYS, UNMARKED, WINNING_LINES, Marker


class InvalidMoveError(ValueError):
    """Raised when marking a square that does not exist or is already taken."""


class Square:
    """A board cell that is either unmarked or holds one marker."""

    def __init__(self, marker: Optional[Marker] = None):
        self.marker = marker

    def is_marked(self) -> bool:
        return self.marker is not None

    def is_unmarked(self) -> bool:
        return self.marker is None

    def __repr__(self) -> str:
        return f"Square({self.marker!r})"

    def __str__(self) -> str:
        return UNMARKED if self.marker is None else str(self.marker)


class Board:
    """
    A 3x3 Tic-Tac-Toe board.

    >>> board = Board()
    >>> board[1] = Marker.X
    >>> board.unmarked_keys()
    [2, 3, 4, 5, 6, 7, 8, 9]
    """

    def __init__(self):
        self.squares: Dict[int, Square] = {}
        self.reset()

    def reset(self):
        """Clear every square."""
        self.squares = {key: Square() for key in SQUARE_KEYS}

    def __getitem__(self, key: int) -> Square:
        return self.squares[key]

    def __setitem__(self, key: int, marker: Marker):
        """
        Mark an open square.

        :raises InvalidMoveError: If the square does not exist or is already marked.
        """
        square = self.squares.get(key)
        if square is None:
            raise InvalidMoveError(f"There is no square {key!r}.")
        if square.is_marked():
            raise InvalidMoveError(f"Square {key} is already marked {square.marker}.")
        square.marker = marker

    def unmarked_keys(self) -> List[int]:
        return [key for key, square in self.squares.items() if square.is_unmarked()]

    def full(self) -> bool:
        return not self.unmarked_keys()

    def markers_on_line(self, line) -> Dict[int, Optional[Marker]]:
        """Map each position on the line to its marker, None when unmarked."""
        return {key: self.squares[key].marker for key in line}

    def winning_marker(self) -> Optional[Marker]:
        """
        Return the marker of the first line with three identical markers.

        Lines are checked rows first, then columns, then diagonals.
        """
        for line in WINNING_LINES:
            markers = [self.squares[key].marker for key in line]
            if markers[0] is not None and markers.count(markers[0]) == len(line):
                return markers[0]
        return None

    def someone_won(self) -> bool:
        return self.winning_marker() is not None

    def draw(self) -> List[str]:
        """Render the board as a grid of text lines."""
        lines = []
        for row_start in (1, 4, 7):
            if lines:
                lines.append("-----+-----+-----")
            cells = [str(self.squares[key]) for key in range(row_start, row_start + 3)]
            lines.append("     |     |")
            lines.append(f"  {cells[0]}  |  {cells[1]}  |  {cells[2]}")
            lines.append("     |     |")
        return lines

    def __str__(self) -> str:
        return "\n".join(self.draw())
