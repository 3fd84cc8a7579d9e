import pytest

from parlor.twentyone.hand import TwentyOneHand
from parlor.twentyone.rules import (
    Outcome,
    determine_outcome,
    should_dealer_hit,
    should_reveal_dealer,
)


@pytest.fixture
def hand(make_cards):
    def factory(*ranks):
        return TwentyOneHand(make_cards(*ranks))

    return factory


@pytest.mark.parametrize(
    "ranks, expected",
    [
        (("10", "6"), True),
        (("10", "7"), False),
        (("A", "6"), False),  # stands on soft 17
        (("A", "5"), True),
        (("K", "Q", "5"), False),
    ],
)
def test_should_dealer_hit(hand, ranks, expected):
    assert should_dealer_hit(hand(*ranks)) is expected


def test_player_bust_beats_dealer_bust(hand):
    assert (
        determine_outcome(hand("K", "Q", "5"), hand("K", "Q", "6"))
        == Outcome.PLAYER_BUSTED
    )


def test_dealer_bust(hand):
    assert determine_outcome(hand("10", "2"), hand("K", "6", "9")) == Outcome.DEALER_BUSTED


def test_higher_total_wins(hand):
    assert determine_outcome(hand("10", "9"), hand("8", "K")) == Outcome.PLAYER_WIN
    assert determine_outcome(hand("10", "7"), hand("8", "K")) == Outcome.DEALER_WIN


def test_tie(hand):
    assert determine_outcome(hand("10", "8"), hand("9", "9")) == Outcome.TIE


def test_outcome_sides():
    assert Outcome.PLAYER_WIN.player_won
    assert Outcome.DEALER_BUSTED.player_won
    assert Outcome.PLAYER_BUSTED.dealer_won
    assert Outcome.DEALER_WIN.dealer_won
    assert not Outcome.TIE.player_won
    assert not Outcome.TIE.dealer_won


def test_reveal_when_player_busted(hand):
    assert should_reveal_dealer(hand("K", "Q", "5"), hand("10", "2"))


def test_reveal_when_dealer_stands(hand):
    assert should_reveal_dealer(hand("10", "8"), hand("10", "7"))


def test_no_reveal_when_dealer_busted(hand):
    assert not should_reveal_dealer(hand("10", "8"), hand("10", "6", "9"))


def test_no_reveal_below_seventeen(hand):
    assert not should_reveal_dealer(hand("10", "8"), hand("10", "6"))
