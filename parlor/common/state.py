"""
This module contains the GameState class, the abstract base class of the
state-pattern nodes that drive both games.

A game owns a ``current_state``. Each state's ``handle`` method performs the
work of that stage, talks to the game's IO interface, and moves the game to
the next state with ``game.set_state``.
"""
from abc import ABC, abstractmethod


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__
