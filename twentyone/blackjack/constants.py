"""Blackjack-specific constants and value mappings."""

from twentyone.common.card import Rank

BLACKJACK = 21
DEALER_HIT_LIMIT = 16  # the dealer draws while its score is at or below this

ACE_HIGH_VALUE = 11
ACE_LOW_VALUE = Rank.ACE.rank_value

# Fixed scoring values; the Ace is resolved by the scorer
BLACKJACK_VALUES = {rank: rank.rank_value for rank in Rank if rank is not Rank.ACE}

TEN_VALUE_RANKS = frozenset(
    rank for rank, value in BLACKJACK_VALUES.items() if value == 10
)


def get_blackjack_value(rank: Rank) -> int:
    """Get the fixed blackjack value for a non-Ace rank."""
    try:
        return BLACKJACK_VALUES[rank]
    except KeyError:
        raise ValueError(f"{rank} has no fixed blackjack value") from None
