"""
Tests for the event system.

This module contains tests for the EventEmitter and EventBus classes
to ensure they provide the expected behavior for event handling.
"""

import logging
from unittest.mock import MagicMock

from twentyone.events import EventEmitter, EventBus, EngineEventType, EventPriority


def test_on_with_string_event_type():
    """Test subscribing to an event with a string event type."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on("test_event", callback)

    test_data = {"value": "test"}
    emitter.emit("test_event", test_data)
    callback.assert_called_once_with(test_data)

    unsubscribe()
    emitter.emit("test_event", {"value": "test2"})
    assert callback.call_count == 1


def test_on_with_enum_event_type():
    """Enum and name subscriptions are interchangeable."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.CARD_DEALT, callback)
    emitter.emit("CARD_DEALT", {"card": "A of ♠"})

    callback.assert_called_once_with({"card": "A of ♠"})


def test_once_subscription():
    """Test subscribing to an event for a single occurrence."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.once("test_event", callback)
    emitter.emit("test_event", {"id": 1})
    emitter.emit("test_event", {"id": 2})

    callback.assert_called_once()
    assert callback.call_args[0][0]["id"] == 1


def test_on_any_subscription():
    """Test subscribing to all events."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on_any(callback)
    emitter.emit("event1", {"id": 1})
    emitter.emit(EngineEventType.GAME_ENDED, {"id": 2})

    assert callback.call_count == 2
    event_type, event_data = callback.call_args_list[1][0][0]
    assert event_type == "GAME_ENDED"
    assert event_data["id"] == 2

    unsubscribe()
    emitter.emit("event3", {"id": 3})
    assert callback.call_count == 2


def test_emitter_priority():
    """Test that handlers are called in priority order."""
    emitter = EventEmitter()
    call_order = []

    emitter.on("test_event", lambda data: call_order.append("normal"), EventPriority.NORMAL)
    emitter.on("test_event", lambda data: call_order.append("low"), EventPriority.LOW)
    emitter.on("test_event", lambda data: call_order.append("critical"), EventPriority.CRITICAL)
    emitter.on("test_event", lambda data: call_order.append("high"), EventPriority.HIGH)
    emitter.on("test_event", lambda data: call_order.append("normal2"), EventPriority.NORMAL)

    emitter.emit("test_event", {})

    assert call_order == ["critical", "high", "normal", "normal2", "low"]


def test_handler_error_is_logged(caplog):
    """A failing handler is logged and later handlers still run."""
    emitter = EventEmitter()
    failing = MagicMock(side_effect=ValueError("boom"))
    after = MagicMock()

    emitter.on("test_event", failing, EventPriority.HIGH)
    emitter.on("test_event", after)

    with caplog.at_level(logging.ERROR, logger="twentyone.events"):
        emitter.emit("test_event", {})

    after.assert_called_once()
    assert "Error in event handler for test_event" in caplog.text


def test_remove_all_listeners():
    emitter = EventEmitter()
    specific = MagicMock()
    other = MagicMock()
    global_handler = MagicMock()

    emitter.on("a", specific)
    emitter.on("b", other)
    emitter.on_any(global_handler)

    emitter.remove_all_listeners("a")
    emitter.emit("a", {})
    emitter.emit("b", {})
    specific.assert_not_called()
    other.assert_called_once()
    assert global_handler.call_count == 2

    emitter.remove_all_listeners()
    emitter.emit("b", {})
    assert other.call_count == 1
    assert global_handler.call_count == 2


def test_event_bus_singleton():
    """EventBus hands out one shared emitter."""
    assert EventBus.get_instance() is EventBus.get_instance()
    assert isinstance(EventBus.get_instance(), EventEmitter)
