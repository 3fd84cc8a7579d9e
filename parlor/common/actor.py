"""
This module contains the Actor abstract base class.

Actor serves as a blueprint for anyone holding cards at the table: it owns a
name and a single hand, and knows how to take a card from a deck. Concrete
games extend it with their own hand type and any extra behavior.
"""

from abc import ABC, abstractmethod

from parlor.common.deck import Deck
from parlor.common.hand import Hand


class Actor(ABC):
    """
    Abstract base class representing an actor in a card game.

    :param name: Name of the actor
    """

    def __init__(self, name: str):
        self.name = name
        self.hand = self.new_hand()

    @abstractmethod
    def new_hand(self) -> Hand:
        """
        Build an empty hand of the type this actor plays with.
        """

    def reset(self):
        """
        Throw away the current hand and start with an empty one.

        :return: None
        """
        self.hand = self.new_hand()

    def receive_card(self, card):
        """
        Add a new card to the actor's hand.

        :param card: The card to add
        :return: None
        """
        self.hand.add_card(card)

    def hit(self, deck: Deck):
        """
        Deal one card from the deck into the actor's hand.

        :param deck: The deck to deal from
        :return: The card that was dealt
        """
        card = deck.deal()
        self.receive_card(card)
        return card

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {self.hand!r})"
