"""
Suit and rank enumerations.

Enumeration order is stable and is the order the standard deck is built in.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """The four suits."""

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"


class Rank(IntEnum):
    """
    The thirteen ranks, Two through Ace.

    Values follow card strength, so the ace is the highest.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


def get_all_suits() -> List[Suit]:
    """Return every suit in enumeration order."""
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """Return every rank in enumeration order."""
    return list(Rank)
