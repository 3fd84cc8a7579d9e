import pytest

from parlor.common.card import Card, Rank, Suit


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.ACE)) == "Ace of Hearts"
    assert str(Card(Suit.CLUBS, Rank.TEN)) == "10 of Clubs"
    assert str(Card(Suit.SPADES, Rank.QUEEN)) == "Queen of Spades"
    assert str(Card(Suit.DIAMONDS, Rank.TWO)) == "2 of Diamonds"


def test_card_repr():
    card = Card(Suit.SPADES, Rank.KING)
    assert repr(card) == "Card(Suit.SPADES, Rank.KING)"


def test_card_face_value():
    assert Card(Suit.HEARTS, Rank.SEVEN).face_value == 7
    assert Card(Suit.HEARTS, Rank.TEN).face_value == 10
    assert Card(Suit.HEARTS, Rank.JACK).face_value == 10
    assert Card(Suit.HEARTS, Rank.QUEEN).face_value == 10
    assert Card(Suit.HEARTS, Rank.KING).face_value == 10
    assert Card(Suit.HEARTS, Rank.ACE).face_value == 11


def test_card_is_ace():
    assert Card(Suit.CLUBS, Rank.ACE).is_ace
    assert not Card(Suit.CLUBS, Rank.KING).is_ace


def test_card_equality_and_hash():
    card1 = Card(Suit.HEARTS, Rank.EIGHT)
    card2 = Card(Suit.HEARTS, Rank.EIGHT)
    card3 = Card(Suit.DIAMONDS, Rank.EIGHT)
    assert card1 == card2
    assert card1 != card3
    assert len({card1, card2, card3}) == 2


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.EIGHT)
    with pytest.raises(AttributeError):
        card.rank = Rank.NINE


def test_invalid_card():
    with pytest.raises(TypeError):
        Card("H", Rank.TWO)
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, "2")


def test_suit_and_rank_symbols():
    assert [suit.value for suit in Suit] == ["H", "D", "S", "C"]
    assert [rank.value for rank in Rank] == [
        "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A",
    ]
