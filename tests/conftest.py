"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared across the test suite.
"""

import random

import pytest

from twentyone.common.card import Card, Rank, Suit
from twentyone.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def rng():
    """A seeded random source so shuffles are reproducible."""
    return random.Random(1234)


@pytest.fixture
def make_hand():
    """
    Build a tuple of cards from ranks.

    Suits cycle so that repeated ranks produce distinct cards.
    """
    suits = list(Suit)

    def _make_hand(*ranks: Rank):
        return tuple(Card(suits[i % len(suits)], rank) for i, rank in enumerate(ranks))

    return _make_hand
