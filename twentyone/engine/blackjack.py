"""
Blackjack session engine.

`BlackjackEngine` owns the single game state a front end works with and
threads it through the pure transition functions, keeping per-session tallies
of finished games.
"""

from collections import Counter
from typing import Any, Dict, Optional
import logging
import random
import time

from twentyone.blackjack.outcome import resolve
from twentyone.blackjack.state import Action, GameResult, GameState
from twentyone.blackjack.transitions import (
    InvalidActionError,
    apply_action,
    is_finished,
    reset,
)
from twentyone.common.deck import ShuffleMethod
from twentyone.events import EventBus, EngineEventType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "shuffle_method": ShuffleMethod.UNIFORM.value,
    "seed": None,
    "auto_reset": False,
}


def load_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge user configuration over the defaults.

    Args:
        config: Partial configuration

    Returns:
        Complete configuration

    Raises:
        ValueError: If a key is unknown or a value is invalid
    """
    merged = dict(DEFAULT_CONFIG)
    config = config or {}

    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
    merged.update(config)

    # Raises ValueError for an unknown method
    merged["shuffle_method"] = ShuffleMethod(merged["shuffle_method"]).value
    if merged["seed"] is not None and not isinstance(merged["seed"], int):
        raise ValueError(f"Seed must be an integer, got {merged['seed']!r}")
    merged["auto_reset"] = bool(merged["auto_reset"])
    return merged


class BlackjackEngine:
    """
    Engine for a single player against the dealer.

    The engine holds the current `GameState` and replaces it on every action.
    It never mutates a state it has handed out.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the blackjack engine.

        Args:
            config: Configuration options, merged over DEFAULT_CONFIG
        """
        self.config = load_config(config)
        self.rng = random.Random(self.config["seed"])
        self.shuffle_method = ShuffleMethod(self.config["shuffle_method"])
        self.event_bus = EventBus.get_instance()
        self.state: Optional[GameState] = None
        self.games_played = 0
        self.results: Counter = Counter()

    def start_game(self) -> GameState:
        """
        Deal a new game, discarding any game in progress.

        Returns:
            The opening game state
        """
        self.state = reset(self.state, rng=self.rng, method=self.shuffle_method)
        self.event_bus.emit(
            EngineEventType.GAME_STARTED,
            {"game_id": self.state.id, "timestamp": time.time()},
        )
        logger.info("Started game %s", self.state.id)
        return self.state

    def execute_player_action(self, action: str) -> GameState:
        """
        Execute a player action.

        Args:
            action: "hit", "stand" or "reset"

        Returns:
            The new game state
        """
        try:
            action = Action(action)
        except ValueError:
            raise InvalidActionError(f"Unknown action: {action!r}") from None

        if action is Action.RESET:
            return self.start_game()
        if self.state is None:
            self.start_game()

        if self.is_finished:
            if self.config["auto_reset"]:
                self.start_game()
            else:
                logger.warning(
                    "Ignoring %s for finished game %s", action.value, self.state.id
                )
                return self.state

        try:
            self.state = apply_action(
                self.state, action, rng=self.rng, method=self.shuffle_method
            )
        except Exception as e:
            self.event_bus.emit(
                EngineEventType.ERROR,
                {
                    "game_id": self.state.id,
                    "action": action.value,
                    "error": str(e),
                    "timestamp": time.time(),
                },
            )
            logger.error(
                "Action %s failed in game %s: %s", action.value, self.state.id, e
            )
            raise

        if self.is_finished:
            self._record_result()
        return self.state

    def hit(self) -> GameState:
        return self.execute_player_action(Action.HIT)

    def stand(self) -> GameState:
        return self.execute_player_action(Action.STAND)

    def reset(self) -> GameState:
        return self.execute_player_action(Action.RESET)

    @property
    def is_finished(self) -> bool:
        return self.state is not None and is_finished(self.state)

    @property
    def result(self) -> GameResult:
        """The result of the current game, or NO_RESULT while it is in progress."""
        if not self.is_finished:
            return GameResult.NO_RESULT
        return resolve(self.state)

    @property
    def status(self) -> str:
        """The result name once the game is finished, otherwise whose turn it is."""
        if self.state is None:
            return "not_started"
        if self.is_finished:
            return self.result.value
        return self.state.turn.value

    def render_state(self) -> Dict[str, Any]:
        """
        Convert the current state to the format a front end displays.

        Returns:
            Dictionary in adapter-friendly format, including session tallies
        """
        if self.state is None:
            self.start_game()
        view = self.state.to_adapter_format()
        view["games_played"] = self.games_played
        view["results"] = {
            result.value: self.results[result]
            for result in GameResult
            if result is not GameResult.NO_RESULT
        }
        return view

    def _record_result(self) -> None:
        result = resolve(self.state)
        self.games_played += 1
        self.results[result] += 1
        logger.info(
            "Game %s finished: %s (%d games played)",
            self.state.id,
            result.value,
            self.games_played,
        )
