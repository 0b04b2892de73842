"""
Session engine for twentyone.

The engine owns the current game state on behalf of a front end and drives it
through the pure transition functions.
"""

from twentyone.engine.blackjack import BlackjackEngine, DEFAULT_CONFIG, load_config

__all__ = ["BlackjackEngine", "DEFAULT_CONFIG", "load_config"]
