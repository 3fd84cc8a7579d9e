from parlor.tictactoe.actor import Player
from parlor.tictactoe.constants import SCORE_TO_WIN, Marker
from parlor.tictactoe.scoreboard import Scoreboard

HUMAN = Player("Ada", Marker.X)
COMPUTER = Player("BB8", Marker.O, is_computer=True)


def test_scores_start_at_zero():
    scoreboard = Scoreboard()
    assert scoreboard.score_to_win == SCORE_TO_WIN == 3
    assert scoreboard.score_of(HUMAN) == 0
    assert scoreboard.score_of(COMPUTER) == 0


def test_tally_credits_winner():
    scoreboard = Scoreboard()
    assert scoreboard.tally(Marker.O) == Marker.O
    assert scoreboard.score_of(COMPUTER) == 1
    assert scoreboard.score_of(HUMAN) == 0


def test_tie_credits_nobody():
    scoreboard = Scoreboard()
    assert scoreboard.tally(None) is None
    assert scoreboard.scores == {Marker.X: 0, Marker.O: 0}


def test_grand_champion_after_three_wins():
    scoreboard = Scoreboard()
    for _ in range(2):
        scoreboard.tally(Marker.X)
        scoreboard.tally(Marker.O)
    assert scoreboard.grand_champion([HUMAN, COMPUTER]) is None

    scoreboard.tally(Marker.X)
    assert scoreboard.is_grand_champion(HUMAN)
    assert not scoreboard.is_grand_champion(COMPUTER)
    assert scoreboard.grand_champion([HUMAN, COMPUTER]) == HUMAN


def test_scores_persist_until_reset():
    scoreboard = Scoreboard(score_to_win=5)
    scoreboard.tally(Marker.X)
    scoreboard.tally(Marker.X)
    assert scoreboard.score_of(HUMAN) == 2
    scoreboard.reset()
    assert scoreboard.score_of(HUMAN) == 0


def test_player_is_immutable():
    assert HUMAN == Player("Ada", Marker.X)
    assert not HUMAN.is_computer
    try:
        HUMAN.marker = Marker.O
    except AttributeError:
        pass
    else:
        assert False, "Expected players to be immutable"
