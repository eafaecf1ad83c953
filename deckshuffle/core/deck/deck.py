"""
Deck of playing cards.

The front of the deck is the next card drawn. Internally the cards live in a
list used as a stack: the last element is the front, so a draw is a pop().
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional

from .card import Card
from .shuffle import FisherYatesShuffleStrategy, ShuffleStrategy
from .types import get_all_ranks, get_all_suits
from ..exceptions import InvalidArgumentError, OutOfRangeError


logger = logging.getLogger(__name__)

DECK_SIZE = 52


def _standard_cards() -> List[Card]:
    """All 52 cards, suits outer and ranks inner."""
    return [
        Card(rank, suit)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    ]


def _checked_cards(cards: Iterable[Card]) -> List[Card]:
    if isinstance(cards, (str, bytes)):
        raise InvalidArgumentError("cards must be an iterable of Card, got a string")
    try:
        checked = list(cards)
    except TypeError:
        raise InvalidArgumentError(f"cards must be iterable, got {type(cards).__name__}") from None
    for card in checked:
        if not isinstance(card, Card):
            raise InvalidArgumentError(f"deck items must be Card, got {type(card).__name__}")
    if len(checked) > DECK_SIZE:
        raise InvalidArgumentError(f"a deck holds at most {DECK_SIZE} cards, got {len(checked)}")
    duplicates = [card for card, count in Counter(checked).items() if count > 1]
    if duplicates:
        raise InvalidArgumentError(f"duplicate cards: {', '.join(map(str, duplicates))}")
    return checked


class Deck:
    """
    An ordered deck of cards with one-at-a-time draws.

    A deck only ever shrinks. Draws remove the front card; shuffles reorder the
    remaining cards without changing how many there are. Access to one deck
    from several threads must be serialized by the caller.

    Examples:
        >>> deck = Deck.new_deck()
        >>> deck.shuffle(3)
        >>> card = deck.next_card()
        >>> deck.remaining_cards
        51
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        """
        Args:
            cards: cards in construction order, the last one becoming the front.
                None builds the standard 52-card deck.

        Raises:
            InvalidArgumentError: when an item is not a Card, a card repeats,
                or there are more than DECK_SIZE cards
        """
        self._cards: List[Card] = _standard_cards() if cards is None else _checked_cards(cards)
        logger.debug("Deck created with %d cards", len(self._cards))

    @classmethod
    def new_deck(cls) -> 'Deck':
        """
        Build a full 52-card deck in its fixed initial order.

        Cards are constructed suits outer, ranks inner; the last one built
        (ace of spades) is the first drawn.
        """
        return cls()

    @property
    def remaining_cards(self) -> int:
        """Number of cards not yet drawn."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """True when no cards remain."""
        return not self._cards

    def next_card(self) -> Optional[Card]:
        """
        Remove and return the front card.

        Returns:
            Optional[Card]: the drawn card, or None when the deck is empty
        """
        if not self._cards:
            return None
        card = self._cards.pop()
        if not self._cards:
            logger.debug("Deck exhausted")
        return card

    def next_cards(self, count: int) -> List[Card]:
        """
        Draw up to count cards, front first.

        Stops early if the deck runs out.

        Args:
            count: maximum number of cards to draw

        Returns:
            List[Card]: the drawn cards in draw order

        Raises:
            OutOfRangeError: when count is negative
        """
        if count < 0:
            raise OutOfRangeError(f"count must be >= 0, got {count}")

        drawn = []
        while len(drawn) < count and self._cards:
            drawn.append(self.next_card())
        return drawn

    def peek(self) -> Optional[Card]:
        """Return the front card without drawing it, or None when empty."""
        if not self._cards:
            return None
        return self._cards[-1]

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle with the default Fisher-Yates strategy.

        Args:
            times: number of passes, at least 1

        Raises:
            InvalidArgumentError: when times is not an int
            OutOfRangeError: when times < 1
        """
        self.shuffle_with(FisherYatesShuffleStrategy(times))

    def shuffle_with(self, strategy: ShuffleStrategy) -> None:
        """
        Reorder the remaining cards with the given strategy.

        The strategy receives the cards front-first; whatever ends up first in
        that list becomes the next card drawn. The deck is only updated once the
        strategy returns, so a failing strategy leaves it untouched.

        Args:
            strategy: any object with a shuffle(cards) method

        Raises:
            InvalidArgumentError: when strategy is missing, has no shuffle method,
                or changes which cards are in the deck
        """
        if strategy is None:
            raise InvalidArgumentError("strategy must not be None")
        if not callable(getattr(strategy, "shuffle", None)):
            raise InvalidArgumentError(f"{type(strategy).__name__} has no shuffle method")

        front_first = self._cards[::-1]
        strategy.shuffle(front_first)
        if Counter(front_first) != Counter(self._cards):
            raise InvalidArgumentError(
                f"{type(strategy).__name__} changed the set of cards while shuffling"
            )

        front_first.reverse()
        self._cards = front_first
        logger.debug("Deck shuffled with %r, %d cards", strategy, len(self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(remaining_cards={len(self._cards)})"


def new_deck() -> Deck:
    """Build a full 52-card deck. Shorthand for Deck.new_deck()."""
    return Deck.new_deck()
