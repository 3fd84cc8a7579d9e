"""
This module provides the turn controller for a game of 21. It uses the state
design pattern to move a hand through its stages: WelcomeState, DealingState,
PlayerTurnState, DealerTurnState, ShowdownState, ReplayState and finally
GameOverState.

The handle method in each game state class performs the work of that stage,
notifies the IO interface, and transitions the game to the next state.
"""

import logging

from parlor.common.prompts import ask_choice, ask_name, ask_yes_no
from parlor.common.state import GameState
from parlor.twentyone.actor import Player
from parlor.twentyone.constants import HIT, MAX_HAND_VALUE, STAY
from parlor.twentyone.rules import Outcome, determine_outcome, should_reveal_dealer

logger = logging.getLogger(__name__)


def show_player_hand(game):
    game.io_interface.output(f"{game.player.name} has: {game.player.show_hand()}.")


def show_dealer_hand(game):
    game.io_interface.output(f"Dealer has: {game.dealer.show_hand()}.")


class WelcomeState(GameState):
    """
    Greets the player, asking for a name the first time round.
    """

    def handle(self, game):
        if game.player is None:
            name = ask_name(game.io_interface, "Welcome! What's your name?")
            game.player = Player(name)
        game.io_interface.output(
            f"Welcome to the {MAX_HAND_VALUE} game, {game.player.name}! "
            "The computer will be the dealer in this game."
        )
        game.set_state(DealingState())


class DealingState(GameState):
    """
    Deals two cards each, alternating player then dealer.
    """

    def handle(self, game):
        for _ in range(2):
            game.player.hit(game.deck)
            game.dealer.hit(game.deck)

        game.io_interface.output(f"Dealer has: {game.dealer.up_card} and unknown card.")
        show_player_hand(game)
        game.set_state(PlayerTurnState())


class PlayerTurnState(GameState):
    """
    Lets the player hit until they stay or bust.
    """

    def handle(self, game):
        io = game.io_interface
        while not game.player.is_busted:
            answer = ask_choice(
                io,
                f"Enter '{HIT}' to hit or '{STAY}' to stay.",
                (HIT, STAY),
                "Sorry, that's not a valid choice.",
            )
            if answer == HIT.upper():
                io.output("You chose to hit!")
                game.player.hit(game.deck)
                show_player_hand(game)
            else:
                io.output("You chose to stay. Dealer's turn!")
                break

        if game.player.is_busted:
            logger.info("%s busted with %d", game.player.name, game.player.total)
            game.set_state(ShowdownState())
        else:
            game.set_state(DealerTurnState())


class DealerTurnState(GameState):
    """
    The dealer hits below 17 and stands on 17 or more.
    """

    def handle(self, game):
        io = game.io_interface
        while not game.dealer.is_busted:
            if not game.dealer.should_hit():
                io.output("Dealer stays.")
                break
            io.output("Dealer hit!")
            game.dealer.hit(game.deck)
            show_dealer_hand(game)

        logger.info("Dealer finished with %d", game.dealer.total)
        game.set_state(ShowdownState())


class ShowdownState(GameState):
    """
    Shows the final hands and announces the result.
    """

    def handle(self, game):
        if should_reveal_dealer(game.player.hand, game.dealer.hand):
            show_dealer_hand(game)
        if not game.player.is_busted:
            show_player_hand(game)

        outcome = determine_outcome(game.player.hand, game.dealer.hand)
        game.record_outcome(outcome)
        game.io_interface.output(self.describe(outcome, game.player.name))
        game.set_state(ReplayState())

    @staticmethod
    def describe(outcome: Outcome, player_name: str) -> str:
        if outcome == Outcome.PLAYER_BUSTED:
            return f"{player_name} busted - Dealer wins!"
        if outcome == Outcome.DEALER_BUSTED:
            return f"Dealer busted - {player_name} wins!"
        if outcome == Outcome.PLAYER_WIN:
            return f"{player_name} wins!"
        if outcome == Outcome.DEALER_WIN:
            return "Dealer wins!"
        return "It's a tie!"


class ReplayState(GameState):
    """
    Asks whether to play another hand with a fresh deck.
    """

    def handle(self, game):
        again = ask_yes_no(
            game.io_interface,
            "Would you like to play again? Enter 'y' for yes, 'n' for no.",
        )
        game.io_interface.clear()
        if again:
            game.reset()
            game.set_state(WelcomeState())
        else:
            game.set_state(GameOverState())


class GameOverState(GameState):
    def handle(self, game):
        game.io_interface.output(f"Thank you for playing {MAX_HAND_VALUE}! Goodbye!")
