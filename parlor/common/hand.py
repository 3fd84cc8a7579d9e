"""
This module contains classes to represent a hand of cards in a card game.

It includes an abstract base class `AbstractHand`, and a concrete implementation `Hand`.
Each hand can have multiple cards, and provides a method for adding cards.

Classes:

AbstractHand: An abstract base class for a hand of cards.
Hand: A concrete implementation of a hand of cards.
"""
from abc import ABC
from typing import List

from parlor.common.card import Card
from parlor.common.util import join_words


class AbstractHand(ABC):
    """
    An abstract base class for a hand of cards.

    This class provides a basic structure for a hand of cards, including a method to add cards.
    """

    def __init__(self, cards=None):
        self._cards: List[Card] = list(cards) if cards else []

    @property
    def cards(self) -> List[Card]:
        """Returns the cards in the hand."""
        return self._cards

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Args:
            card: The card to add.
        """
        self._cards.append(card)

    def __len__(self) -> int:
        return len(self._cards)


class Hand(AbstractHand):
    """
    A concrete implementation of a hand of cards.

    This class provides a string representation of a hand of cards for both debugging and display purposes.
    """

    def __repr__(self) -> str:
        """
        Returns a string in the form "Hand([Card(...), ...])".
        """
        return f"{self.__class__.__name__}({self.cards!r})"

    def __str__(self) -> str:
        """
        Returns the cards as a grammatical list, e.g. "Ace of Hearts, 2 of Clubs, and King of Spades".
        """
        return join_words(self.cards)
