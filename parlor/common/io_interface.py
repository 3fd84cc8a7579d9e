"""
This module contains the IOInterface abstract base class and its implementations.
"""

import os
import subprocess
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for the line-oriented input/output
    operations the games perform.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""

    @abstractmethod
    def input(self, prompt: str = "") -> str:
        """Get a line of input from the user with an optional prompt."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the screen."""


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""

    def input(self, prompt: str = "") -> str:
        """Simulates input operation."""
        return ""

    def clear(self) -> None:
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and replays scripted input.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next scripted input line.

    def add_input(self, *responses):
        Queue more scripted input lines.
    """

    __test__ = False

    def __init__(self, input_responses: Optional[Iterable[str]] = None):
        self.sent_messages: List[str] = []
        self.input_responses: List[str] = list(input_responses or [])
        self.clear_count = 0

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str = "") -> str:
        if prompt:
            self.sent_messages.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise EOFError("No more scripted input left in TestIOInterface queue.")

    def add_input(self, *responses: str) -> None:
        self.input_responses.extend(responses)

    def clear(self) -> None:
        self.clear_count += 1


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Methods
    -------
    def output(self, message: str):
        Output a message to the console.

    def input(self, prompt: str):
        Read a line from the console, without the trailing newline.

    def clear(self):
        Clear the terminal unless clearing was disabled.
    """

    def __init__(self, clear_screen: bool = True):
        self.clear_screen = clear_screen

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str = "") -> str:
        return input(prompt)

    def clear(self) -> None:
        if not self.clear_screen:
            return
        command = "cls" if os.name == "nt" else "clear"
        subprocess.run(command, shell=True, check=False)
