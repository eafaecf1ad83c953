"""
Playing card value type.

Card is immutable; two cards are equal when rank and suit match.
"""

from dataclasses import dataclass
from typing import Dict

from .types import Suit, Rank


_RANK_CODES: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A",
}

_SUIT_CODES: Dict[Suit, str] = {
    Suit.HEARTS: "H", Suit.DIAMONDS: "D",
    Suit.CLUBS: "C", Suit.SPADES: "S",
}

_RANKS_BY_CODE: Dict[str, Rank] = {code: rank for rank, code in _RANK_CODES.items()}
_RANKS_BY_CODE["T"] = Rank.TEN

_SUITS_BY_CODE: Dict[str, Suit] = {code: suit for suit, code in _SUIT_CODES.items()}


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Attributes:
        rank: card rank
        suit: card suit

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> str(card)
        'AS'
        >>> card == Card.from_str("as")
        True
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        Validate field types.

        Raises:
            TypeError: when rank is not a Rank or suit is not a Suit
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit).__name__}")

    def __str__(self) -> str:
        return f"{_RANK_CODES[self.rank]}{_SUIT_CODES[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        Parse a short card code such as "AS", "10h" or "Td".

        Args:
            card_str: rank code followed by a one-letter suit code

        Returns:
            Card: the parsed card

        Raises:
            TypeError: when card_str is not a string
            ValueError: when the code is malformed
        """
        if not isinstance(card_str, str):
            raise TypeError(f"card code must be a string, got {type(card_str).__name__}")
        if len(card_str) < 2:
            raise ValueError(f"malformed card code: {card_str!r}")

        rank_code, suit_code = card_str[:-1].upper(), card_str[-1].upper()
        if rank_code not in _RANKS_BY_CODE:
            raise ValueError(f"unknown rank: {rank_code!r}")
        if suit_code not in _SUITS_BY_CODE:
            raise ValueError(f"unknown suit: {suit_code!r}")

        return cls(_RANKS_BY_CODE[rank_code], _SUITS_BY_CODE[suit_code])
