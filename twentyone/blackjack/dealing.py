"""
Game setup: shuffles a fresh deck and deals the opening hands.
"""

import logging
import random
from typing import Optional

from twentyone.blackjack.state import GameState, Turn
from twentyone.common.deck import ShuffleMethod, new_deck, shuffle
from twentyone.events import EventBus, EngineEventType

logger = logging.getLogger(__name__)


def setup_game(
    rng: Optional[random.Random] = None,
    method: ShuffleMethod = ShuffleMethod.UNIFORM,
) -> GameState:
    """
    Deal a new game.

    The top two cards of a freshly shuffled deck go to the player and the next
    two to the dealer. The remaining 48 cards stay in the deck and the player
    moves first.

    Args:
        rng: Random source for the shuffle
        method: Shuffle algorithm to use

    Returns:
        The opening game state
    """
    deck = shuffle(new_deck(), rng=rng, method=method)

    state = GameState(
        player_hand=deck[-2:],
        dealer_hand=deck[-4:-2],
        deck=deck[:-4],
        turn=Turn.PLAYER_TURN,
    )

    event_bus = EventBus.get_instance()
    event_bus.emit(
        EngineEventType.SHUFFLE,
        {
            "game_id": state.id,
            "method": ShuffleMethod(method).value,
            "deck_size": len(deck),
            "timestamp": state.timestamp,
        },
    )
    hands = (("player", state.player_hand), ("dealer", state.dealer_hand))
    for recipient, hand in hands:
        for card in hand:
            event_bus.emit(
                EngineEventType.CARD_DEALT,
                {
                    "game_id": state.id,
                    "recipient": recipient,
                    "card": str(card),
                    "timestamp": state.timestamp,
                },
            )
    event_bus.emit(
        EngineEventType.GAME_CREATED,
        {"game_id": state.id, "timestamp": state.timestamp},
    )

    logger.debug(
        "Dealt game %s: player %s, dealer %s, %d cards left",
        state.id,
        ", ".join(map(str, state.player_hand)),
        ", ".join(map(str, state.dealer_hand)),
        state.remaining,
    )
    return state
