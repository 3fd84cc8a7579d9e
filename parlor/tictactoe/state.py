"""
This module provides the match controller for Tic-Tac-Toe. The match moves
through SetupState, then RoundState and ScoreTallyState for every round,
ChampionState once a side reaches the winning score, ReplayState to offer a
fresh match, and finally GameOverState.
"""

import logging

from parlor.common.prompts import ask_choice, ask_name, ask_yes_no
from parlor.common.state import GameState
from parlor.tictactoe.actor import Player
from parlor.tictactoe.constants import (
    COMPUTER_CHOOSES,
    COMPUTER_NAMES,
    FIRST_TO_MOVE,
    Marker,
)

logger = logging.getLogger(__name__)


class SetupState(GameState):
    """
    Asks for the human's name and marker, and names the computer opponent.
    """

    def handle(self, game):
        io = game.io_interface
        name = ask_name(io, "Welcome to the Tic Tac Toe game! What's your name?")
        choice = ask_choice(
            io,
            "Enter X to play as 'X', O to play as 'O', or C to let the computer "
            f"choose for you. '{FIRST_TO_MOVE}' goes first.",
            [marker.value for marker in Marker] + [COMPUTER_CHOOSES],
            "Sorry, please enter X, O, or C.",
        )
        if choice == COMPUTER_CHOOSES:
            human_marker = game.rng.choice(list(Marker))
        else:
            human_marker = Marker(choice)

        game.human = Player(name, human_marker)
        game.computer = Player(
            game.rng.choice(COMPUTER_NAMES), human_marker.other, is_computer=True
        )
        logger.info("%s plays %s against %s", name, human_marker, game.computer.name)

        io.clear()
        io.output(
            f"Welcome to the Tic Tac Toe game, {game.human.name}! You'll be playing "
            f"against the droid {game.computer.name}. First player with "
            f"{game.scoreboard.score_to_win} wins is the grand champion!"
        )
        io.output("")
        game.set_state(RoundState())


class RoundState(GameState):
    """
    Alternates moves, X first, until someone wins or the board fills up.
    """

    def handle(self, game):
        game.current_marker = FIRST_TO_MOVE
        while True:
            if game.human_turn():
                game.display_board()
                game.human_moves()
                game.io_interface.clear()
            else:
                game.computer_moves()
            game.alternate_turn()
            if game.board.someone_won() or game.board.full():
                break
        game.set_state(ScoreTallyState())


class ScoreTallyState(GameState):
    """
    Credits the round winner, shows the result and both scores.
    """

    def handle(self, game):
        io = game.io_interface
        winning_marker = game.board.winning_marker()
        game.scoreboard.tally(winning_marker)
        winner = game.player_with(winning_marker)
        game.round_winners.append(winner)

        game.clear_screen_and_display_board()
        if winner is None:
            io.output("It's a tie!")
        else:
            io.output(f"{winner.name} won!")
        io.output(
            f"{game.human.name} has {game.scoreboard.score_of(game.human)} wins. "
            f"{game.computer.name} has {game.scoreboard.score_of(game.computer)} wins."
        )

        game.reset_board()
        champion = game.scoreboard.grand_champion([game.human, game.computer])
        if champion is None:
            game.set_state(RoundState())
        else:
            game.set_state(ChampionState(champion))


class ChampionState(GameState):
    def __init__(self, champion: Player):
        self.champion = champion

    def handle(self, game):
        score = game.scoreboard.score_of(self.champion)
        if self.champion.is_computer:
            message = (
                f"With {score} wins, {self.champion.name} is the grand champion. "
                "Better luck next time, human!"
            )
        else:
            message = (
                f"With {score} wins, {self.champion.name} is the grand champion! "
                "Congrats on beating the robots!"
            )
        logger.info("%s is the grand champion", self.champion.name)
        game.champions.append(self.champion)
        game.io_interface.output(message)
        game.set_state(ReplayState())


class ReplayState(GameState):
    """
    Offers a whole new match. Names and markers are kept; scores are not.
    """

    def handle(self, game):
        io = game.io_interface
        again = ask_yes_no(
            io,
            "Would you like to play again? (enter y for yes, n for no)",
            "Sorry, answer must be y or n",
        )
        if not again:
            game.set_state(GameOverState())
            return

        game.reset_board()
        io.clear()
        game.scoreboard.reset()
        io.output("Let's play again!")
        io.output("")
        game.set_state(RoundState())


class GameOverState(GameState):
    def handle(self, game):
        name = game.human.name if game.human else "friend"
        game.io_interface.output(f"Thanks for playing Tic Tac Toe, {name} - goodbye!")
