"""Events published by decks and players."""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable

from blackjack.config import config


class EventType(Enum):
    """Types of rules-engine events."""

    # Deck events
    DECK_SHUFFLED = auto()
    DECK_RESET = auto()
    CARDS_TAKEN = auto()
    CARDS_RETURNED = auto()

    # Betting events
    BET_PLACED = auto()
    BET_REJECTED = auto()

    # Error events
    INSUFFICIENT_FUNDS = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable rules-engine event.

    Events let a surrounding game loop or UI observe deck and bankroll
    changes without the engine knowing about it.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Simple event emitter.

    Allows subscribing to specific event types or all events. History is
    unbounded unless ``history_limit`` is given; long-running callers should
    either set a limit or call ``clear_history`` between rounds.
    """

    def __init__(self, history_limit: int | None = None) -> None:
        """
        Initialize the event emitter.

        Args:
            history_limit: Keep only the most recent events (None keeps all)

        Events are logged automatically when ``config.log_events`` or
        ``config.debug`` is set.
        """
        if history_limit is not None and history_limit < 0:
            raise ValueError("history_limit must not be negative")

        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: deque[GameEvent] = deque(maxlen=history_limit)
        if config.log_events or config.debug:
            log_events(self)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Record an event and pass it to type-specific then catch-all handlers."""
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return list(self._event_history)

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()


def log_events(
    emitter: EventEmitter,
    logger: logging.Logger | None = None,
) -> EventHandler:
    """
    Forward every event from ``emitter`` to a standard library logger.

    Error events are logged at WARNING, everything else at DEBUG.

    Returns:
        The subscribed handler, so it can be passed to ``unsubscribe``.
    """
    log = logger or logging.getLogger("blackjack.events")

    def handler(event: GameEvent) -> None:
        level = (
            logging.WARNING
            if event.event_type in (EventType.INSUFFICIENT_FUNDS, EventType.BET_REJECTED)
            else logging.DEBUG
        )
        log.log(level, "%s", event)

    emitter.subscribe(handler)
    return handler
