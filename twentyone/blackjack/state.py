"""
Immutable state model for a game of blackjack between a player and the dealer.

The `GameState` dataclass is frozen; the functions in
`twentyone.blackjack.transitions` derive new states from old ones rather than
modifying them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple
import time
import uuid

from twentyone.common.card import Card


class Turn(Enum):
    """Whose move the game is waiting on."""

    PLAYER_TURN = "player_turn"
    DEALER_TURN = "dealer_turn"


class GameResult(Enum):
    """Outcome of comparing the player's hand with the dealer's."""

    NO_RESULT = "no_result"
    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    DRAW = "draw"


class Action(Enum):
    """Actions a front end can request."""

    HIT = "hit"
    STAND = "stand"
    RESET = "reset"


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of a blackjack game.

    Attributes:
        player_hand: Cards held by the player, in the order received
        dealer_hand: Cards held by the dealer, in the order received
        deck: Undealt cards; the last element is the top of the deck
        turn: Whose move the game is waiting on
        id: Unique identifier for this game, kept across transitions
        timestamp: Time when the game was dealt
    """

    player_hand: Tuple[Card, ...] = ()
    dealer_hand: Tuple[Card, ...] = ()
    deck: Tuple[Card, ...] = ()
    turn: Turn = Turn.PLAYER_TURN
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: float = field(default_factory=lambda: time.time())

    @property
    def remaining(self) -> int:
        """Number of cards left in the deck."""
        return len(self.deck)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "id": self.id,
            "turn": self.turn.value,
            "timestamp": self.timestamp,
            "player_hand": [str(card) for card in self.player_hand],
            "dealer_hand": [str(card) for card in self.dealer_hand],
            "deck_cards_remaining": self.remaining,
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the game state to what a front end shows.

        While the player is to move, the dealer's first card is hidden and the
        dealer's score is withheld. The status is the result once the game is
        finished, otherwise the turn.

        Returns:
            Dictionary in adapter-friendly format
        """
        from twentyone.blackjack.outcome import resolve
        from twentyone.blackjack.scoring import score

        result = resolve(self)
        finished = (
            self.turn is Turn.DEALER_TURN and result is not GameResult.NO_RESULT
        )
        hide_hole_card = self.turn is Turn.PLAYER_TURN and len(self.dealer_hand) > 0

        if hide_hole_card:
            dealer_cards = [None] + [str(card) for card in self.dealer_hand[1:]]
            dealer_score = None
        else:
            dealer_cards = [str(card) for card in self.dealer_hand]
            dealer_score = score(self.dealer_hand)

        return {
            "status": result.value if finished else self.turn.value,
            "finished": finished,
            "deck_cards_remaining": self.remaining,
            "player": {
                "cards": [str(card) for card in self.player_hand],
                "score": score(self.player_hand),
            },
            "dealer": {
                "cards": dealer_cards,
                "score": dealer_score,
            },
        }
