"""
Shuffle strategies.

A ShuffleStrategy reorders a mutable sequence of cards in place. Deck depends
only on that capability, so the randomization policy can be swapped without
touching draw semantics.
"""

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from typing import Optional, Protocol

from .card import Card
from ..exceptions import InvalidArgumentError, OutOfRangeError


logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that yields uniform integers in [a, b] inclusive."""

    def randint(self, a: int, b: int) -> int:
        ...


# Shared by every strategy built without an explicit source. random.Random
# calls are atomic, so independent decks may shuffle concurrently.
DEFAULT_RANDOM = random.Random()


class ShuffleStrategy(ABC):
    """Reorders a sequence of cards in place."""

    @abstractmethod
    def shuffle(self, cards: 'MutableSequence[Card]') -> None:
        """
        Shuffle the given cards in place.

        The same cards must be present afterwards; only their order may change.

        Args:
            cards: mutable sequence of cards to reorder
        """


class FisherYatesShuffleStrategy(ShuffleStrategy):
    """
    Fisher-Yates shuffle, repeated for a configurable number of passes.

    Each pass on its own produces a uniform permutation. Extra passes keep the
    result uniform and cost O(n) each.

    Attributes:
        passes: number of full passes per shuffle call
    """

    def __init__(self, passes: int = 1, random_source: Optional[RandomSource] = None) -> None:
        """
        Args:
            passes: number of passes, at least 1
            random_source: source of uniform integers; defaults to DEFAULT_RANDOM

        Raises:
            InvalidArgumentError: when passes is not an int or random_source has no randint
            OutOfRangeError: when passes < 1
        """
        if isinstance(passes, bool) or not isinstance(passes, int):
            raise InvalidArgumentError(f"passes must be an int, got {type(passes).__name__}")
        if passes < 1:
            raise OutOfRangeError(f"passes must be >= 1, got {passes}")
        if random_source is None:
            random_source = DEFAULT_RANDOM
        elif not callable(getattr(random_source, "randint", None)):
            raise InvalidArgumentError("random_source must provide randint(a, b)")

        self._passes = passes
        self._rng = random_source

    @property
    def passes(self) -> int:
        return self._passes

    def shuffle(self, cards: 'MutableSequence[Card]') -> None:
        """
        Run the configured number of Fisher-Yates passes over cards.

        Args:
            cards: mutable sequence of cards, reordered in place

        Raises:
            InvalidArgumentError: when cards is None or not a mutable sequence
        """
        if cards is None:
            raise InvalidArgumentError("cards must not be None")
        if not isinstance(cards, MutableSequence):
            raise InvalidArgumentError(f"cards must be a mutable sequence, got {type(cards).__name__}")

        logger.debug("Fisher-Yates shuffle: %d cards, %d pass(es)", len(cards), self._passes)
        for _ in range(self._passes):
            for i in range(len(cards) - 1, 0, -1):
                j = self._rng.randint(0, i)
                cards[i], cards[j] = cards[j], cards[i]

    def __repr__(self) -> str:
        return f"FisherYatesShuffleStrategy(passes={self._passes})"
