"""
Deck management.

Provides Card and Deck, plus the shuffle strategies a Deck delegates to.
"""

from .types import Suit, Rank
from .card import Card
from .shuffle import ShuffleStrategy, FisherYatesShuffleStrategy, DEFAULT_RANDOM
from .deck import Deck, new_deck

__all__ = [
    'Suit',
    'Rank',
    'Card',
    'ShuffleStrategy',
    'FisherYatesShuffleStrategy',
    'DEFAULT_RANDOM',
    'Deck',
    'new_deck',
]
