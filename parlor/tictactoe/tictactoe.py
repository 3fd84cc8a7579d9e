"""
This module is used to play Tic-Tac-Toe against a computer opponent.

A match is a series of rounds; the first side to win three rounds is the
grand champion. Run it from the console, e.g. `parlor-tictactoe` or
`python -m parlor.tictactoe.tictactoe --seed 7`.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from parlor.common.io_interface import ConsoleIOInterface, IOInterface
from parlor.common.log import configure_logging
from parlor.common.prompts import ask_number
from parlor.common.util import join_words
from parlor.tictactoe.actor import Player
from parlor.tictactoe.board import Board
from parlor.tictactoe.constants import FIRST_TO_MOVE, SCORE_TO_WIN, Marker
from parlor.tictactoe.scoreboard import Scoreboard
from parlor.tictactoe.state import GameOverState, RoundState, SetupState
from parlor.tictactoe.strategy import ComputerStrategy

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    A class to represent a Tic-Tac-Toe match between a human and the computer.

    Attributes
    ----------
    io_interface : IOInterface
        Interface for input and output operations.
    board : Board
        The board of the round in progress.
    scoreboard : Scoreboard
        Round wins of both sides.
    human, computer : Player
        The two sides. Both are None until setup has run, unless passed in.
    current_marker : Marker
        Marker of the side to move next.
    round_winners : list
        Winner of every round played, None for ties.
    champions : list
        Grand champion of every finished match.
    """

    def __init__(
        self,
        io_interface: IOInterface,
        rng: Optional[random.Random] = None,
        human: Optional[Player] = None,
        computer: Optional[Player] = None,
        score_to_win: int = SCORE_TO_WIN,
    ):
        self.io_interface = io_interface
        self.rng = rng or random.Random()
        self.strategy = ComputerStrategy(rng=self.rng)
        self.board = Board()
        self.scoreboard = Scoreboard(score_to_win)
        self.human = human
        self.computer = computer
        self.current_marker = FIRST_TO_MOVE
        self.round_winners: List[Optional[Player]] = []
        self.champions: List[Player] = []
        if human is not None and computer is not None:
            self.current_state = RoundState()
        else:
            self.current_state = SetupState()

    def set_state(self, state):
        """Change the current state of the game."""
        logger.debug("Changing state from %s to %s", self.current_state, state)
        self.current_state = state

    def play(self):
        """Play matches until the human declines a new one."""
        while not isinstance(self.current_state, GameOverState):
            self.current_state.handle(self)
        self.current_state.handle(self)

    def human_turn(self) -> bool:
        return self.current_marker == self.human.marker

    def alternate_turn(self):
        self.current_marker = self.current_marker.other

    def player_with(self, marker: Optional[Marker]) -> Optional[Player]:
        for player in (self.human, self.computer):
            if marker is not None and player.marker == marker:
                return player
        return None

    def human_moves(self):
        open_squares = self.board.unmarked_keys()
        square = ask_number(
            self.io_interface,
            f"Choose a square: {join_words(open_squares, conjunction='or')}",
            open_squares,
            "Sorry, that's not a valid choice.",
            repeat_prompt=False,
        )
        self.board[square] = self.human.marker
        logger.debug("%s (%s) plays %d", self.human.name, self.human.marker, square)

    def computer_moves(self):
        square = self.strategy.choose_square(self.board, self.computer.marker)
        self.board[square] = self.computer.marker

    def display_board(self):
        io = self.io_interface
        io.output(
            f"You're playing as {self.human.marker}. {self.computer.name} is "
            f"playing as {self.computer.marker}."
        )
        io.output("")
        for line in self.board.draw():
            io.output(line)
        io.output("")

    def clear_screen_and_display_board(self):
        self.io_interface.clear()
        self.display_board()

    def reset_board(self):
        self.board.reset()
        self.current_marker = FIRST_TO_MOVE


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Play Tic Tac Toe against a computer opponent."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random number generator for reproducible computer moves.",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        help="Logging level (default: $PARLOR_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Write log records to the specified file instead of stderr.",
    )
    parser.add_argument(
        "--no_clear",
        action="store_true",
        default=False,
        help="Do not clear the screen between moves.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    io_interface = ConsoleIOInterface(clear_screen=not args.no_clear)
    game = TicTacToeGame(io_interface, rng=random.Random(args.seed))

    io_interface.clear()
    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        io_interface.output("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
