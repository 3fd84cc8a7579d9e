"""
21 game implementation.

A blackjack-style game between one player and the computer dealer, with
ace-flexible hand valuation and a hit-until-17 dealer.
"""

from parlor.twentyone.actor import Dealer, Participant, Player
from parlor.twentyone.hand import TwentyOneHand
from parlor.twentyone.rules import (
    Outcome,
    determine_outcome,
    should_dealer_hit,
    should_reveal_dealer,
)
from parlor.twentyone.twentyone import TwentyOneGame

__all__ = [
    "Dealer",
    "Participant",
    "Player",
    "TwentyOneHand",
    "Outcome",
    "determine_outcome",
    "should_dealer_hit",
    "should_reveal_dealer",
    "TwentyOneGame",
]
