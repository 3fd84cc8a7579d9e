"""Players of a Tic-Tac-Toe match."""

from dataclasses import dataclass

from parlor.tictactoe.constants import Marker


@dataclass(frozen=True)
class Player:
    """
    Immutable representation of a player.

    Attributes:
        name: Display name of the player
        marker: The marker the player places
        is_computer: Whether the computer moves for this player
    """

    name: str
    marker: Marker
    is_computer: bool = False
