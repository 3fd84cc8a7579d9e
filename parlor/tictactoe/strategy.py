"""
The computer opponent's move heuristic.

The computer looks one move ahead only. Its policy is an ordered list of
rules; the first rule that names a square decides the move:

1. WinNowRule: complete a line holding two of its own markers.
2. BlockRule: fill the open square of a line holding two opponent markers.
3. CenterRule: take the center square.
4. RandomRule: take any open square at random.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from parlor.tictactoe.board import Board
from parlor.tictactoe.constants import CENTER_SQUARE, WINNING_LINES, Marker

logger = logging.getLogger(__name__)


def find_completing_square(board: Board, marker: Marker) -> Optional[int]:
    """
    Find the open square that would give ``marker`` three in a line.

    Returns the open square of the first winning line holding exactly two of
    ``marker`` and one unmarked square, or None.
    """
    for line in WINNING_LINES:
        markers = board.markers_on_line(line)
        values = list(markers.values())
        if values.count(marker) == 2 and values.count(None) == 1:
            return next(key for key, value in markers.items() if value is None)
    return None


class MoveRule(ABC):
    name = "rule"

    @abstractmethod
    def choose(
        self, board: Board, marker: Marker, rng: random.Random
    ) -> Optional[int]:
        """Return the square this rule plays for ``marker``, or None if it does not apply."""

    def __str__(self) -> str:
        return self.name


class WinNowRule(MoveRule):
    name = "win"

    def choose(self, board, marker, rng):
        return find_completing_square(board, marker)


class BlockRule(MoveRule):
    name = "block"

    def choose(self, board, marker, rng):
        return find_completing_square(board, marker.other)


class CenterRule(MoveRule):
    name = "center"

    def choose(self, board, marker, rng):
        if board[CENTER_SQUARE].is_unmarked():
            return CENTER_SQUARE
        return None


class RandomRule(MoveRule):
    name = "random"

    def choose(self, board, marker, rng):
        open_squares = board.unmarked_keys()
        if not open_squares:
            return None
        return rng.choice(open_squares)


DEFAULT_RULES = (WinNowRule(), BlockRule(), CenterRule(), RandomRule())


class ComputerStrategy:
    """Picks the computer's square by running the rules in order."""

    def __init__(
        self,
        rules: Sequence[MoveRule] = DEFAULT_RULES,
        rng: Optional[random.Random] = None,
    ):
        self.rules = tuple(rules)
        self.rng = rng or random.Random()

    def decide(self, board: Board, marker: Marker) -> Tuple[int, MoveRule]:
        """
        Return the chosen square and the rule that chose it.

        :raises ValueError: If the board has no open square.
        """
        for rule in self.rules:
            square = rule.choose(board, marker, self.rng)
            if square is not None:
                logger.debug("Computer (%s) plays %d by rule %s", marker, square, rule)
                return square, rule
        raise ValueError("No open square left to play.")

    def choose_square(self, board: Board, marker: Marker) -> int:
        square, _ = self.decide(board, marker)
        return square
