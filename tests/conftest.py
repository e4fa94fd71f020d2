"""Pytest configuration and fixtures."""

import random

import pytest

from holdem.game.cards import full_deck, parse_cards


@pytest.fixture
def cards():
    """Parse a string of card codes like 'HA HK'."""
    return parse_cards


@pytest.fixture
def rng():
    """Seeded stdlib generator for picking random test hands."""
    return random.Random(20240611)


@pytest.fixture
def random_seven(rng):
    """Draw random 7-card hands from a fresh deck."""
    def _random_seven():
        return rng.sample(full_deck(), 7)
    return _random_seven
