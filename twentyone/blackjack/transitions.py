"""
State transition functions for blackjack.

Every function takes a game state and returns a new one, leaving the original
untouched. Observers are notified through the event bus.
"""

from dataclasses import replace
from typing import Optional
import logging
import random
import time

from twentyone.blackjack.constants import BLACKJACK, DEALER_HIT_LIMIT
from twentyone.blackjack.dealing import setup_game
from twentyone.blackjack.outcome import resolve
from twentyone.blackjack.scoring import score
from twentyone.blackjack.state import Action, GameResult, GameState, Turn
from twentyone.common.deck import ShuffleMethod, take_card
from twentyone.events import EventBus, EngineEventType

logger = logging.getLogger(__name__)


class InvalidActionError(Exception):
    """Raised when an action is requested that the current state does not allow."""


def is_finished(state: GameState) -> bool:
    """A game is finished once the dealer's turn has a result."""
    return (
        state.turn is Turn.DEALER_TURN
        and resolve(state) is not GameResult.NO_RESULT
    )


def _emit_card_dealt(state: GameState, recipient: str, card) -> None:
    EventBus.get_instance().emit(
        EngineEventType.CARD_DEALT,
        {
            "game_id": state.id,
            "recipient": recipient,
            "card": str(card),
            "deck_cards_remaining": state.remaining,
            "timestamp": time.time(),
        },
    )


def _emit_outcome_events(
    previous: GameState, state: GameState, recipient: str
) -> None:
    # Only changes are announced: a bust when a dealt card crosses 21 and the
    # end of the game when it moves from unfinished to finished
    event_bus = EventBus.get_instance()
    if recipient == "player":
        before, hand = previous.player_hand, state.player_hand
    else:
        before, hand = previous.dealer_hand, state.dealer_hand
    hand_score = score(hand)

    if hand_score > BLACKJACK and score(before) <= BLACKJACK:
        event_bus.emit(
            EngineEventType.HAND_BUSTED,
            {
                "game_id": state.id,
                "recipient": recipient,
                "score": hand_score,
                "timestamp": time.time(),
            },
        )

    if is_finished(state) and not is_finished(previous):
        event_bus.emit(
            EngineEventType.GAME_ENDED,
            {
                "game_id": state.id,
                "result": resolve(state).value,
                "player_score": score(state.player_hand),
                "dealer_score": score(state.dealer_hand),
                "timestamp": time.time(),
            },
        )


def hit(state: GameState) -> GameState:
    """
    The player takes one card, which passes the turn to the dealer.

    Args:
        state: Current game state

    Returns:
        New game state with the card added to the player's hand

    Raises:
        InvalidActionError: If it is not the player's turn
        DeckExhaustedError: If the deck is empty
    """
    if state.turn is not Turn.PLAYER_TURN:
        raise InvalidActionError(f"Cannot hit during {state.turn.value}")

    card, remaining = take_card(state.deck)
    new_state = replace(
        state,
        player_hand=state.player_hand + (card,),
        deck=remaining,
        turn=Turn.DEALER_TURN,
    )

    EventBus.get_instance().emit(
        EngineEventType.PLAYER_ACTION,
        {"game_id": state.id, "action": Action.HIT.value, "timestamp": time.time()},
    )
    _emit_card_dealt(new_state, "player", card)
    _emit_outcome_events(state, new_state, "player")

    logger.debug(
        "Player hit %s in game %s, score now %d",
        card,
        state.id,
        score(new_state.player_hand),
    )
    return new_state


def stand(state: GameState) -> GameState:
    """
    Run one step of the dealer's policy.

    A dealer on 16 or less draws one card and hands the turn back to the
    player, so repeated stands walk the dealer through its draws one card at a
    time. A dealer on 17 or more keeps its hand and the turn stays with the
    dealer, which finishes the game. GAME_ENDED is emitted only when the step
    finishes a game that was not finished before it.

    Args:
        state: Current game state

    Returns:
        New game state after the dealer's step

    Raises:
        DeckExhaustedError: If the dealer must draw from an empty deck
    """
    EventBus.get_instance().emit(
        EngineEventType.PLAYER_ACTION,
        {"game_id": state.id, "action": Action.STAND.value, "timestamp": time.time()},
    )

    dealer_score = score(state.dealer_hand)
    if dealer_score <= DEALER_HIT_LIMIT:
        card, remaining = take_card(state.deck)
        new_state = replace(
            state,
            dealer_hand=state.dealer_hand + (card,),
            deck=remaining,
            turn=Turn.PLAYER_TURN,
        )
        EventBus.get_instance().emit(
            EngineEventType.DEALER_ACTION,
            {
                "game_id": state.id,
                "action": Action.HIT.value,
                "score": score(new_state.dealer_hand),
                "timestamp": time.time(),
            },
        )
        _emit_card_dealt(new_state, "dealer", card)
        _emit_outcome_events(state, new_state, "dealer")
        logger.debug(
            "Dealer drew %s on %d in game %s", card, dealer_score, state.id
        )
        return new_state

    new_state = replace(state, turn=Turn.DEALER_TURN)
    EventBus.get_instance().emit(
        EngineEventType.DEALER_ACTION,
        {
            "game_id": state.id,
            "action": Action.STAND.value,
            "score": dealer_score,
            "timestamp": time.time(),
        },
    )
    _emit_outcome_events(state, new_state, "dealer")
    logger.debug("Dealer stands on %d in game %s", dealer_score, state.id)
    return new_state


def reset(
    state: Optional[GameState] = None,
    rng: Optional[random.Random] = None,
    method: ShuffleMethod = ShuffleMethod.UNIFORM,
) -> GameState:
    """
    Discard the current game and deal a new one.

    Args:
        state: The game being discarded, if any
        rng: Random source for the shuffle
        method: Shuffle algorithm to use

    Returns:
        A freshly dealt game state
    """
    if state is not None:
        logger.debug("Discarding game %s", state.id)
    return setup_game(rng=rng, method=method)


def apply_action(
    state: GameState,
    action: Action,
    rng: Optional[random.Random] = None,
    method: ShuffleMethod = ShuffleMethod.UNIFORM,
) -> GameState:
    """
    Apply a named action to a game state.

    Args:
        state: Current game state
        action: The action to apply, as an Action or its string value
        rng: Random source, used when the action deals a new game
        method: Shuffle algorithm, used when the action deals a new game

    Returns:
        The resulting game state

    Raises:
        InvalidActionError: If the action is unknown or not allowed
    """
    try:
        action = Action(action)
    except ValueError:
        raise InvalidActionError(f"Unknown action: {action!r}") from None

    if action is Action.HIT:
        return hit(state)
    if action is Action.STAND:
        return stand(state)
    return reset(state, rng=rng, method=method)
