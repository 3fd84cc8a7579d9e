import pytest

from parlor.tictactoe.board import Board, InvalidMoveError, Square
from parlor.tictactoe.constants import WINNING_LINES, Marker

X, O = Marker.X, Marker.O


def board_with(**marks):
    """Build a board from keyword lists, e.g. board_with(x=[1, 2], o=[5])."""
    board = Board()
    for key in marks.get("x", []):
        board[key] = X
    for key in marks.get("o", []):
        board[key] = O
    return board


def test_new_board_is_empty():
    board = Board()
    assert board.unmarked_keys() == list(range(1, 10))
    assert not board.full()
    assert board.winning_marker() is None
    assert not board.someone_won()


def test_square():
    square = Square()
    assert square.is_unmarked()
    assert str(square) == " "
    square.marker = O
    assert square.is_marked()
    assert str(square) == "O"


def test_top_row_wins():
    board = board_with(x=[1, 2, 3])
    assert board.winning_marker() == X
    assert board.someone_won()


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line):
    board = board_with(o=list(line))
    assert board.winning_marker() == O


def test_mixed_line_does_not_win():
    board = board_with(x=[1, 2], o=[3])
    assert board.winning_marker() is None


def test_full_board_without_line_is_a_tie():
    # X O X
    # X O O
    # O X X
    board = board_with(x=[1, 3, 4, 8, 9], o=[2, 5, 6, 7])
    assert board.full()
    assert board.winning_marker() is None
    assert not board.someone_won()


def test_marking_taken_square_raises():
    board = board_with(x=[5])
    with pytest.raises(InvalidMoveError):
        board[5] = O
    assert board[5].marker == X


def test_marking_missing_square_raises():
    board = Board()
    with pytest.raises(InvalidMoveError):
        board[10] = X
    with pytest.raises(ValueError):
        board[0] = X


def test_reset_clears_board():
    board = board_with(x=[1, 2, 3], o=[4, 5])
    board.reset()
    assert board.unmarked_keys() == list(range(1, 10))


def test_markers_on_line():
    board = board_with(x=[1], o=[5])
    assert board.markers_on_line((1, 5, 9)) == {1: X, 5: O, 9: None}


def test_draw():
    board = board_with(x=[1, 9], o=[5])
    assert board.draw() == [
        "     |     |",
        "  X  |     |   ",
        "     |     |",
        "-----+-----+-----",
        "     |     |",
        "     |  O  |   ",
        "     |     |",
        "-----+-----+-----",
        "     |     |",
        "     |     |  X",
        "     |     |",
    ]
    assert str(board) == "\n".join(board.draw())
