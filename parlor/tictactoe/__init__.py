"""
Tic-Tac-Toe game implementation.

A human plays a match of rounds against a heuristic computer opponent; the
first side to win three rounds is the grand champion.
"""

from parlor.tictactoe.actor import Player
from parlor.tictactoe.board import Board, InvalidMoveError, Square
from parlor.tictactoe.constants import Marker
from parlor.tictactoe.scoreboard import Scoreboard
from parlor.tictactoe.strategy import ComputerStrategy
from parlor.tictactoe.tictactoe import TicTacToeGame

__all__ = [
    "Player",
    "Board",
    "InvalidMoveError",
    "Square",
    "Marker",
    "Scoreboard",
    "ComputerStrategy",
    "TicTacToeGame",
]
