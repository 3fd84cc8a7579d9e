"""
Rules of 21: when the dealer draws, when the dealer's hole card is shown,
and who wins a hand.
"""

from enum import Enum

from parlor.twentyone.constants import DEALER_HIT_UNTIL
from parlor.twentyone.hand import TwentyOneHand


class Outcome(Enum):
    """Possible outcomes of a hand of 21."""

    PLAYER_BUSTED = "player_busted"
    DEALER_BUSTED = "dealer_busted"
    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    TIE = "tie"

    @property
    def player_won(self) -> bool:
        return self in (Outcome.DEALER_BUSTED, Outcome.PLAYER_WIN)

    @property
    def dealer_won(self) -> bool:
        return self in (Outcome.PLAYER_BUSTED, Outcome.DEALER_WIN)


def should_dealer_hit(hand: TwentyOneHand) -> bool:
    """
    Determine if the dealer draws another card.

    The dealer hits while the total is under 17 and stands on any 17 or more,
    soft or hard. A busted hand never hits.
    """
    return not hand.is_busted and hand.value() < DEALER_HIT_UNTIL


def should_reveal_dealer(player_hand: TwentyOneHand, dealer_hand: TwentyOneHand) -> bool:
    """
    Determine if the dealer's full hand is shown at the end of a hand.

    It is shown when the player busted, or when the dealer finished standing
    on 17 or more. A busted dealer's hand has already been shown while the
    dealer was drawing.
    """
    if player_hand.is_busted:
        return True
    return dealer_hand.value() >= DEALER_HIT_UNTIL and not dealer_hand.is_busted


def determine_outcome(player_hand: TwentyOneHand, dealer_hand: TwentyOneHand) -> Outcome:
    """
    Decide who won the hand.

    Checked in order: player busted, dealer busted, higher total, tie.
    """
    if player_hand.is_busted:
        return Outcome.PLAYER_BUSTED
    if dealer_hand.is_busted:
        return Outcome.DEALER_BUSTED

    player_total = player_hand.value()
    dealer_total = dealer_hand.value()
    if player_total > dealer_total:
        return Outcome.PLAYER_WIN
    if dealer_total > player_total:
        return Outcome.DEALER_WIN
    return Outcome.TIE
