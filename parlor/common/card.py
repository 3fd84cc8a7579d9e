"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Hearts, Diamonds, Spades, and Clubs.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Two through Ten, Jack, Queen, King, and Ace.

- `Card`: An immutable playing card made of a suit and a rank. Cards know
whether they are aces, what they are worth in a game of 21, and how to
print themselves for display.
"""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    HEARTS = "H"
    DIAMONDS = "D"
    SPADES = "S"
    CLUBS = "C"

    @property
    def suit_name(self) -> str:
        """The plural display name of the suit, e.g. "Hearts"."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.suit_name


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.
    """

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def rank_value(self) -> int:
        """The value of the rank, used for scoring. Aces count high."""
        if self == Rank.ACE:
            return 11
        if self.is_face:
            return 10
        return int(self.value)

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        if self == Rank.ACE or self.is_face:
            return self.name.capitalize()
        return self.value

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card. This class is a member of a card deck.

    >>> card = Card(Suit.HEARTS, Rank.ACE)
    >>> print(card)
    Ace of Hearts
    >>> Card(Suit.CLUBS, Rank.TEN).face_value
    10
    """

    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")

    @property
    def is_ace(self) -> bool:
        return self.rank == Rank.ACE

    @property
    def face_value(self) -> int:
        """Numeric value of the card with aces counted as 11."""
        return self.rank.rank_value

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"{self.rank.rank_str} of {self.suit.suit_name}"
