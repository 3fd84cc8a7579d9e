"""Terminal table games: 21 and Tic-Tac-Toe."""

__version__ = "0.1.0"
