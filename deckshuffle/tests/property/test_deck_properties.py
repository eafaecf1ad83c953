"""
Property tests for Deck.

For any interleaving of draws and shuffles the remaining cards are exactly the
full set minus what has been drawn, and the count only ever goes down.
"""

import random
from collections import Counter

import pytest
from hypothesis import given, settings, strategies as st

from deckshuffle.core.deck import Card, Deck, FisherYatesShuffleStrategy, Rank, Suit, new_deck


FULL_DECK = Counter(Card(rank, suit) for suit in Suit for rank in Rank)

# an int n means "shuffle with n passes", None means "draw"
operation_strategy = st.one_of(st.none(), st.integers(min_value=1, max_value=3))


@pytest.mark.property_test
@settings(max_examples=50, deadline=None)
@given(ops=st.lists(operation_strategy, max_size=80), rng=st.randoms(use_true_random=False))
def test_cards_are_conserved(ops, rng):
    """Remaining + drawn is always the full deck."""
    deck = new_deck()
    drawn = []

    for op in ops:
        before = deck.remaining_cards
        if op is None:
            card = deck.next_card()
            if before == 0:
                assert card is None
                assert deck.remaining_cards == 0
            else:
                drawn.append(card)
                assert deck.remaining_cards == before - 1
        else:
            deck.shuffle_with(FisherYatesShuffleStrategy(op, rng))
            assert deck.remaining_cards == before

        remaining = Counter(deck._cards)
        assert remaining + Counter(drawn) == FULL_DECK
        assert deck.is_empty == (deck.remaining_cards == 0)


@pytest.mark.property_test
@given(passes=st.integers(min_value=1, max_value=4), seed=st.integers())
def test_shuffle_is_a_permutation(passes, seed):
    """Fisher-Yates never adds, drops or duplicates cards."""
    cards = list(FULL_DECK)
    FisherYatesShuffleStrategy(passes, random.Random(seed)).shuffle(cards)

    assert Counter(cards) == FULL_DECK


@pytest.mark.property_test
@given(cards=st.lists(
    st.builds(Card, st.sampled_from(Rank), st.sampled_from(Suit)),
    unique=True,
    max_size=52,
))
def test_custom_deck_draws_in_reverse_construction_order(cards):
    deck = Deck(cards)

    assert deck.next_cards(len(cards) + 1) == cards[::-1]
    assert deck.next_card() is None
