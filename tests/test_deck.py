import random
from collections import Counter

import pytest

from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import (
    DeckExhaustedError,
    ShuffleMethod,
    new_deck,
    shuffle,
    take_card,
)


def test_new_deck_has_every_card_once():
    deck = new_deck()
    assert isinstance(deck, tuple)
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert set(deck) == {Card(suit, rank) for suit in Suit for rank in Rank}


def test_new_deck_is_canonical():
    assert new_deck() == new_deck()
    assert new_deck()[0] == Card(Suit.HEARTS, Rank.ACE)
    assert new_deck()[-1] == Card(Suit.SPADES, Rank.KING)


@pytest.mark.parametrize("method", list(ShuffleMethod))
def test_shuffle_is_permutation(method, rng):
    deck = new_deck()
    shuffled = shuffle(deck, rng=rng, method=method)
    assert len(shuffled) == len(deck)
    assert Counter(shuffled) == Counter(deck)


@pytest.mark.parametrize("method", list(ShuffleMethod))
def test_shuffle_changes_order(method, rng):
    deck = new_deck()
    assert shuffle(deck, rng=rng, method=method) != deck


def test_shuffle_does_not_mutate_input(rng):
    cards = list(new_deck())
    original = list(cards)
    shuffle(cards, rng=rng)
    assert cards == original


def test_shuffle_is_reproducible_with_seed():
    first = shuffle(new_deck(), rng=random.Random(42))
    second = shuffle(new_deck(), rng=random.Random(42))
    assert first == second


def test_shuffle_accepts_method_name(rng):
    shuffled = shuffle(new_deck(), rng=rng, method="comparator")
    assert Counter(shuffled) == Counter(new_deck())


def test_shuffle_rejects_unknown_method(rng):
    with pytest.raises(ValueError):
        shuffle(new_deck(), rng=rng, method="riffle")


def test_shuffle_small_decks(rng):
    assert shuffle((), rng=rng) == ()
    card = Card(Suit.CLUBS, Rank.TWO)
    assert shuffle((card,), rng=rng, method=ShuffleMethod.COMPARATOR) == (card,)


def test_take_card_draws_from_top():
    deck = new_deck()
    card, remaining = take_card(deck)
    assert card == deck[-1]
    assert len(remaining) == 51
    assert card not in remaining
    assert remaining == deck[:-1]
    assert len(deck) == 52


def test_take_card_until_empty():
    deck = new_deck()
    drawn = []
    while deck:
        card, deck = take_card(deck)
        drawn.append(card)
    assert len(drawn) == 52
    assert set(drawn) == set(new_deck())


def test_take_card_from_empty_deck():
    with pytest.raises(DeckExhaustedError):
        take_card(())


def test_deck_exhausted_is_index_error():
    with pytest.raises(IndexError):
        take_card(())

