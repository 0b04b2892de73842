"""
twentyone: a rules engine for blackjack between one player and the dealer.

The engine is a set of pure functions over an immutable `GameState`:

>>> import random
>>> state = setup_game(rng=random.Random(7))
>>> state.remaining
48
>>> state = hit(state)
>>> state.turn
<Turn.DEALER_TURN: 'dealer_turn'>
>>> resolve(state) is not GameResult.NO_RESULT
True
"""

from twentyone.blackjack import (
    Action,
    GameResult,
    GameState,
    InvalidActionError,
    Turn,
    apply_action,
    has_blackjack,
    hit,
    is_finished,
    reset,
    resolve,
    score,
    setup_game,
    stand,
)
from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import (
    DeckExhaustedError,
    ShuffleMethod,
    new_deck,
    shuffle,
    take_card,
)

setup = setup_game

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Card",
    "DeckExhaustedError",
    "GameResult",
    "GameState",
    "InvalidActionError",
    "Rank",
    "ShuffleMethod",
    "Suit",
    "Turn",
    "apply_action",
    "has_blackjack",
    "hit",
    "is_finished",
    "new_deck",
    "reset",
    "resolve",
    "score",
    "setup",
    "setup_game",
    "shuffle",
    "stand",
    "take_card",
]
