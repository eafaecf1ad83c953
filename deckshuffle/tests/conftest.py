"""
pytest configuration shared by all deckshuffle tests.

Provides a scripted random source so shuffle results can be computed by hand,
and registers the custom markers.
"""

from typing import Iterable, List

import pytest

from deckshuffle.core.deck import Card, Rank, Suit


class ScriptedRandom:
    """Random source that returns a fixed list of picks in order."""

    def __init__(self, picks: Iterable[int]):
        self.picks: List[int] = list(picks)
        self.calls: List[tuple] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self.picks.pop(0)
        assert a <= value <= b, f"scripted pick {value} outside [{a}, {b}]"
        return value


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def four_cards():
    """Four distinct cards, two of clubs through five of clubs."""
    return [
        Card(Rank.TWO, Suit.CLUBS),
        Card(Rank.THREE, Suit.CLUBS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.CLUBS),
    ]


@pytest.fixture
def full_card_set():
    """Every (rank, suit) combination."""
    return {Card(rank, suit) for suit in Suit for rank in Rank}


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "property_test: hypothesis-based property tests"
    )
    config.addinivalue_line(
        "markers", "integration: tests spanning several modules"
    )
