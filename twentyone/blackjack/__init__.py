"""
Blackjack rules: scoring, outcome resolution, and the turn state machine.
"""

from twentyone.blackjack.dealing import setup_game
from twentyone.blackjack.outcome import resolve, resolve_hands
from twentyone.blackjack.scoring import has_blackjack, is_bust, is_soft, score
from twentyone.blackjack.state import Action, GameResult, GameState, Turn
from twentyone.blackjack.transitions import (
    InvalidActionError,
    apply_action,
    hit,
    is_finished,
    reset,
    stand,
)

__all__ = [
    "Action",
    "GameResult",
    "GameState",
    "InvalidActionError",
    "Turn",
    "apply_action",
    "has_blackjack",
    "hit",
    "is_bust",
    "is_finished",
    "is_soft",
    "reset",
    "resolve",
    "resolve_hands",
    "score",
    "setup_game",
    "stand",
]
