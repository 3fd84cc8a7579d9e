"""
Pytest configuration for tests at the root level.

This module contains fixtures for building cards, stacked decks, and scripted
IO interfaces.
"""

import itertools
import logging
import random

import pytest

from parlor.common.card import Card, Rank, Suit
from parlor.common.deck import Deck
from parlor.common.io_interface import TestIOInterface


def build_cards(*ranks):
    """Build cards from rank symbols, cycling through the suits."""
    suits = itertools.cycle(Suit)
    return [Card(next(suits), Rank(rank)) for rank in ranks]


@pytest.fixture
def make_cards():
    return build_cards


@pytest.fixture
def stacked_deck():
    """
    Build a deck that deals the given ranks in the given order.

    Decks deal from the end of their card list, so the order is reversed.
    """

    def factory(*ranks):
        return Deck(list(reversed(build_cards(*ranks))))

    return factory


@pytest.fixture
def scripted_io():
    def factory(*responses):
        return TestIOInterface(responses)

    return factory


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def reset_parlor_logger():
    """Leave the parlor logger as configure_logging found it."""
    logger = logging.getLogger("parlor")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate
