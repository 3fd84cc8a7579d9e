"""
Re-prompting input helpers shared by the games.

Every helper loops until the user supplies an acceptable answer, printing an
error line between attempts. Invalid input is never an exception.
"""

import logging
from typing import Callable, Collection, Optional

from parlor.common.io_interface import IOInterface

logger = logging.getLogger(__name__)


def ask(
    io_interface: IOInterface,
    prompt: str,
    is_valid: Callable[[str], bool],
    error_message: str,
    normalize: Callable[[str], str] = str.strip,
    repeat_prompt: bool = True,
) -> str:
    """
    Print a prompt and read lines until one passes validation.

    :param io_interface: Where to print the prompt and read the answer.
    :param prompt: Message printed before every attempt, or only before the
                   first one when ``repeat_prompt`` is false.
    :param is_valid: Predicate applied to the normalized answer.
    :param error_message: Message printed after an invalid answer.
    :param normalize: Transformation applied to the raw line before validation.
    :param repeat_prompt: Whether to print the prompt again after an error.
    :return: The first normalized answer accepted by ``is_valid``.
    """
    if not repeat_prompt:
        io_interface.output(prompt)
    while True:
        if repeat_prompt:
            io_interface.output(prompt)
        answer = normalize(io_interface.input())
        if is_valid(answer):
            return answer
        logger.debug("Rejected answer %r to prompt %r", answer, prompt)
        io_interface.output(error_message)


def ask_name(io_interface: IOInterface, prompt: str) -> str:
    return ask(
        io_interface,
        prompt,
        lambda answer: bool(answer),
        "Sorry, please enter a name.",
    )


def ask_choice(
    io_interface: IOInterface,
    prompt: str,
    choices: Collection[str],
    error_message: str,
) -> str:
    """Ask for one of ``choices``, case-insensitively. Returns the upper-cased answer."""
    valid = {choice.upper() for choice in choices}
    return ask(
        io_interface,
        prompt,
        lambda answer: answer in valid,
        error_message,
        normalize=lambda line: line.strip().upper(),
    )


def ask_yes_no(
    io_interface: IOInterface,
    prompt: str,
    error_message: str = "Sorry, please enter 'y' or 'n'.",
) -> bool:
    """Ask a yes/no question. Any answer starting with y or n is accepted."""
    answer = ask(
        io_interface,
        prompt,
        lambda answer: answer.startswith(("y", "n")),
        error_message,
        normalize=lambda line: line.strip().lower(),
    )
    return answer.startswith("y")


def ask_number(
    io_interface: IOInterface,
    prompt: str,
    valid_numbers: Collection[int],
    error_message: str,
    repeat_prompt: bool = True,
) -> int:
    """Ask for an integer contained in ``valid_numbers``."""

    def to_number(answer: str) -> Optional[int]:
        try:
            return int(answer)
        except ValueError:
            return None

    answer = ask(
        io_interface,
        prompt,
        lambda answer: to_number(answer) in valid_numbers,
        error_message,
        repeat_prompt=repeat_prompt,
    )
    return int(answer)
