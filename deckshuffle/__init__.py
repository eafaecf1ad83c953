"""
deckshuffle - a 52-card deck with pluggable shuffling.

Modules:
    core.deck: Card, Deck, and the shuffle strategies
    core.exceptions: error hierarchy
    application: configuration profiles
"""

from .core.deck import (
    Card,
    Deck,
    FisherYatesShuffleStrategy,
    Rank,
    ShuffleStrategy,
    Suit,
    new_deck,
)
from .core.exceptions import DeckConfigError, DeckError, InvalidArgumentError, OutOfRangeError

__version__ = "1.0.0"

__all__ = [
    "Card",
    "Deck",
    "FisherYatesShuffleStrategy",
    "Rank",
    "ShuffleStrategy",
    "Suit",
    "new_deck",
    "DeckError",
    "DeckConfigError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
