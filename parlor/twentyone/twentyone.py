"""
This module is used to play a game of 21 against a computer dealer.

Run it from the console, e.g. `parlor-21` or
`python -m parlor.twentyone.twentyone --seed 7`. The `--log_level` and
`--log_file` options turn on logging of the dealer's and player's draws and
the result of every hand.
"""

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from parlor.common.deck import Deck
from parlor.common.io_interface import ConsoleIOInterface, IOInterface
from parlor.common.log import configure_logging
from parlor.twentyone.actor import Dealer, Player
from parlor.twentyone.rules import Outcome
from parlor.twentyone.state import GameOverState, WelcomeState

logger = logging.getLogger(__name__)


class TwentyOneGame:
    """
    A class to represent a game of 21.

    Attributes
    ----------
    io_interface : IOInterface
        Interface for input and output operations.
    player : Player
        The human player, created on the first hand if no name was given.
    dealer : Dealer
        The computer dealer.
    deck : Deck
        The deck for the current hand. A new one is built for every hand.
    outcomes : list
        Outcome of every hand played so far.
    current_state : GameState
        Current state of the game.
    """

    def __init__(
        self,
        io_interface: IOInterface,
        player_name: Optional[str] = None,
        rng: Optional[random.Random] = None,
        deck_factory: Optional[Callable[[], Deck]] = None,
    ):
        self.io_interface = io_interface
        self.rng = rng or random.Random()
        self.deck_factory = deck_factory or (lambda: Deck(rng=self.rng))
        self.player = Player(player_name) if player_name else None
        self.dealer = Dealer()
        self.deck = self.deck_factory()
        self.outcomes: List[Outcome] = []
        self.current_state = WelcomeState()

    @property
    def last_outcome(self) -> Optional[Outcome]:
        return self.outcomes[-1] if self.outcomes else None

    def set_state(self, state):
        """Change the current state of the game."""
        logger.debug("Changing state from %s to %s", self.current_state, state)
        self.current_state = state

    def record_outcome(self, outcome: Outcome):
        logger.info("Hand %d finished: %s", len(self.outcomes) + 1, outcome.value)
        self.outcomes.append(outcome)

    def play(self):
        """Play hands until the player declines to play again."""
        while not isinstance(self.current_state, GameOverState):
            self.current_state.handle(self)
        self.current_state.handle(self)

    def reset(self):
        """Start a new hand with a fresh deck and empty hands. The player's name is kept."""
        self.deck = self.deck_factory()
        self.player.reset()
        self.dealer.reset()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play a game of 21 against the dealer.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random number generator for reproducible shuffles.",
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
        help="Do not clear the screen between hands.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main function to start the game.

    It handles command-line arguments, sets up logging and the console, and
    plays hands until the player is done.
    """
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    io_interface = ConsoleIOInterface(clear_screen=not args.no_clear)
    game = TwentyOneGame(io_interface, rng=random.Random(args.seed))

    try:
        game.play()
    except (EOFError, KeyboardInterrupt):
        io_interface.output("\nGoodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
