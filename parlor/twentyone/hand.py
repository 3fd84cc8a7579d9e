"""
Hand evaluation for the game of 21.
"""

from parlor.common.hand import Hand
from parlor.twentyone.constants import ACE_ADJUSTMENT, MAX_HAND_VALUE


class TwentyOneHand(Hand):
    """A hand in the game of 21."""

    @property
    def num_aces(self) -> int:
        return sum(1 for card in self.cards if card.is_ace)

    def value(self) -> int:
        """
        Calculate the best value of the hand.

        Every ace starts out worth 11. Then, once per ace, 10 is taken off the
        total while it is over 21. Only the number of aces matters, so the
        value does not depend on the order of the cards.
        """
        total = sum(card.face_value for card in self.cards)
        for _ in range(self.num_aces):
            if total > MAX_HAND_VALUE:
                total -= ACE_ADJUSTMENT
        return total

    @property
    def total(self) -> int:
        return self.value()

    @property
    def is_busted(self) -> bool:
        return self.value() > MAX_HAND_VALUE

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace still counted as 11)."""
        if self.num_aces == 0:
            return False
        hard_total = sum(card.face_value for card in self.cards) - (
            ACE_ADJUSTMENT * self.num_aces
        )
        return self.value() > hard_total

    def show(self) -> str:
        """Render the hand for display, e.g. "Ace of Hearts and 9 of Clubs (total: 20)"."""
        return f"{self} (total: {self.value()})"
