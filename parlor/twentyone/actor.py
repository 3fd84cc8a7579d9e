"""
This module contains the participants of a game of 21.

The `Participant` class holds a `TwentyOneHand` and exposes the questions the
turn controller asks about it. `Player` is the named human at the table and
`Dealer` is the computer, which plays by a fixed hit-until rule.
"""

import logging

from parlor.common.actor import Actor
from parlor.twentyone.hand import TwentyOneHand
from parlor.twentyone.rules import should_dealer_hit

logger = logging.getLogger(__name__)


class Participant(Actor):
    """Anyone holding a hand of 21."""

    def new_hand(self) -> TwentyOneHand:
        return TwentyOneHand()

    @property
    def total(self) -> int:
        return self.hand.value()

    @property
    def is_busted(self) -> bool:
        return self.hand.is_busted

    def show_hand(self) -> str:
        return self.hand.show()

    def hit(self, deck):
        card = super().hit(deck)
        logger.debug("%s drew %s (total: %d)", self.name, card, self.total)
        return card


class Player(Participant):
    pass


class Dealer(Participant):
    def __init__(self, name: str = "Dealer"):
        super().__init__(name)

    @property
    def up_card(self):
        """The dealer's face-up card, or None before the deal."""
        return self.hand.cards[0] if self.hand.cards else None

    def should_hit(self) -> bool:
        return should_dealer_hit(self.hand)
