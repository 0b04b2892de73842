"""
Hand scoring for blackjack.

A hand is any sequence of cards. Scores above 21 are returned as they are;
deciding what a bust means is left to the outcome resolver.
"""

from typing import Sequence

from twentyone.blackjack.constants import (
    ACE_HIGH_VALUE,
    ACE_LOW_VALUE,
    BLACKJACK,
    TEN_VALUE_RANKS,
    get_blackjack_value,
)
from twentyone.common.card import Card, Rank


def _split_aces(hand: Sequence[Card]):
    fixed_total = 0
    num_aces = 0
    for card in hand:
        if card.rank is Rank.ACE:
            num_aces += 1
        else:
            fixed_total += get_blackjack_value(card.rank)
    return fixed_total, num_aces


def score(hand: Sequence[Card]) -> int:
    """
    Calculate the best score of a hand.

    Aces are resolved one at a time. Only the last Ace to be resolved may count
    as 11, and only when that keeps the total at or below 21; every other Ace
    counts as 1.

    >>> from twentyone.common.card import Suit
    >>> score([Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.KING)])
    21
    >>> score([])
    0
    """
    total, num_aces = _split_aces(hand)

    while num_aces > 0:
        tentative = total + ACE_HIGH_VALUE
        if num_aces > 1 or tentative > BLACKJACK:
            total += ACE_LOW_VALUE
        else:
            total = tentative
        num_aces -= 1

    return total


def is_soft(hand: Sequence[Card]) -> bool:
    """Return True when an Ace in the hand currently counts as 11."""
    total, num_aces = _split_aces(hand)
    if num_aces == 0:
        return False
    return score(hand) == total + num_aces - ACE_LOW_VALUE + ACE_HIGH_VALUE


def is_bust(hand: Sequence[Card]) -> bool:
    return score(hand) > BLACKJACK


def has_blackjack(hand: Sequence[Card]) -> bool:
    """
    Return True when the hand holds at least one Ace and at least one ten-valued card.

    The check looks at every card in the hand, not only the first two.
    """
    has_ace = any(card.rank is Rank.ACE for card in hand)
    has_ten = any(card.rank in TEN_VALUE_RANKS for card in hand)
    return has_ace and has_ten
