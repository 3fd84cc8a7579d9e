"""Round-win bookkeeping across a Tic-Tac-Toe match."""

import logging
from typing import Dict, Iterable, Optional

from parlor.tictactoe.actor import Player
from parlor.tictactoe.constants import SCORE_TO_WIN, Marker

logger = logging.getLogger(__name__)


class Scoreboard:
    """
    Counts round wins per marker.

    Scores carry over from round to round and only go back to zero on an
    explicit reset, which happens when a whole new match is started.
    """

    def __init__(self, score_to_win: int = SCORE_TO_WIN):
        self.score_to_win = score_to_win
        self.scores: Dict[Marker, int] = {}
        self.reset()

    def reset(self):
        self.scores = {marker: 0 for marker in Marker}

    def tally(self, winning_marker: Optional[Marker]) -> Optional[Marker]:
        """
        Credit a round win. A tie (None) credits nobody.

        :return: The marker that was credited, if any.
        """
        if winning_marker is None:
            logger.info("Round tied")
            return None
        self.scores[winning_marker] += 1
        logger.info(
            "Round won by %s (score %d)", winning_marker, self.scores[winning_marker]
        )
        return winning_marker

    def score_of(self, player: Player) -> int:
        return self.scores[player.marker]

    def is_grand_champion(self, player: Player) -> bool:
        return self.score_of(player) >= self.score_to_win

    def grand_champion(self, players: Iterable[Player]) -> Optional[Player]:
        """Return the first player to have reached the winning score, if any."""
        for player in players:
            if self.is_grand_champion(player):
                return player
        return None
