"""
This module contains the Deck class, which represents a deck of cards.

>>> deck = Deck()
>>> deck.size
52
>>> card = deck.deal()
>>> deck.size
51
"""

import random
from typing import List, Optional, Union

from parlor.common.card import Card, Rank, Suit


class DeckExhaustedError(IndexError):
    """Raised when a card is dealt from an empty deck."""


class Deck:
    """
    A class representing a deck of cards.

    A deck built without an explicit card list holds all 52 cards and is
    shuffled straight away. Cards are dealt from the end of the list.
    """

    # Precompute the default deck
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(
        self,
        cards: Union[List[Card], None] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If provided, the cards are kept in the given order.
        :param rng: Random number generator used for shuffling (optional).
        >>> deck = Deck()
        >>> deck.size
        52
        """
        self.rng = rng or random.Random()
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
            self.shuffle()
        else:
            self.cards = cards.copy()

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        """
        return self._default_deck.copy()

    def shuffle(self):
        """
        Shuffle the cards in the deck.
        """
        self.rng.shuffle(self.cards)
        return self

    def deal(self, num_cards=1) -> Union[Card, List[Card]]:
        """
        Pop n cards from the deck.

        :return: A card instance or a list of card instances.
        :raises DeckExhaustedError: If the deck runs out of cards.
        >>> deck = Deck()
        >>> cards = deck.deal(5)
        >>> len(cards)
        5
        """
        if num_cards == 1:
            return self._pop()
        return [self._pop() for _ in range(num_cards)]

    def _pop(self) -> Card:
        try:
            return self.cards.pop()
        except IndexError as exc:
            raise DeckExhaustedError("Cannot deal from an empty deck.") from exc

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self.cards)

    def reset(self):
        """
        Reset the deck to a full, freshly shuffled set of 52 cards.
        """
        self.cards = self.initialize_default_deck()
        self.shuffle()

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        >>> str(Deck())
        'Deck of 52 cards'
        """
        return f"Deck of {len(self.cards)} cards"
