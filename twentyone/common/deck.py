"""
Functions for building, shuffling and drawing from a deck of cards.

A deck is a tuple of `Card` instances. The top of the deck is the last
element, so drawing is a slice rather than a reordering. None of the
functions here mutate their input.

>>> deck = new_deck()
>>> len(deck)
52
>>> card, rest = take_card(deck)
>>> card
Card(Suit.SPADES, Rank.KING)
>>> len(rest)
51
"""

import functools
import logging
import random
from enum import Enum
from typing import Optional, Sequence, Tuple

from twentyone.common.card import Card, Rank, Suit

logger = logging.getLogger(__name__)

Deck = Tuple[Card, ...]

# Precompute the canonical deck
_CANONICAL_DECK: Deck = tuple(Card(suit, rank) for suit in Suit for rank in Rank)


class DeckExhaustedError(IndexError):
    """Raised when a card is drawn from an empty deck."""


class ShuffleMethod(Enum):
    """
    Available shuffle algorithms.

    UNIFORM is a Fisher-Yates shuffle. COMPARATOR sorts with a comparator that
    returns an independent random sign on every comparison; the resulting
    permutation is not uniform and is kept for reproducing that behavior.
    """

    UNIFORM = "uniform"
    COMPARATOR = "comparator"


def new_deck() -> Deck:
    """
    Construct a deck with every combination of suit and rank exactly once.

    :return: A tuple of 52 cards in canonical order (suit order, then Ace to King).
    """
    return _CANONICAL_DECK


def shuffle(
    deck: Sequence[Card],
    rng: Optional[random.Random] = None,
    method: ShuffleMethod = ShuffleMethod.UNIFORM,
) -> Deck:
    """
    Return a shuffled copy of the deck.

    :param deck: Cards to shuffle. The sequence is not modified.
    :param rng: Random source; the module-level generator is used if omitted.
    :param method: Shuffle algorithm to use.
    :return: A permutation of the input cards.
    :raises ValueError: If the method is not a known ShuffleMethod.
    """
    if rng is None:
        rng = random
    method = ShuffleMethod(method)
    cards = list(deck)

    if method is ShuffleMethod.UNIFORM:
        rng.shuffle(cards)
    elif method is ShuffleMethod.COMPARATOR:
        cards.sort(key=functools.cmp_to_key(lambda a, b: rng.random() - 0.5))
    else:
        raise ValueError(f"Unsupported shuffle method: {method}")

    logger.debug("Shuffled %d cards using %s", len(cards), method.value)
    return tuple(cards)


def take_card(deck: Sequence[Card]) -> Tuple[Card, Deck]:
    """
    Draw the top card of the deck.

    :param deck: The deck to draw from.
    :return: The drawn card and the remaining deck, one card shorter.
    :raises DeckExhaustedError: If the deck is empty.
    """
    if not deck:
        raise DeckExhaustedError("Cannot draw from an empty deck")
    return deck[-1], tuple(deck[:-1])

