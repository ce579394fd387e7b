"""
Event bus for Tribunal condition changes.

The condition systems publish through the ``Publisher`` port and never
read a response. ``EventBus`` is the in-process implementation; the host
subscribes its toasts, particle layer and voice system to it.

Usage:
    from .event_bus import EventBus, EventType

    bus = EventBus()
    bus.on(EventType.EFFECT_APPLIED, my_handler)

    # Systems emit when state changes
    bus.emit(EventType.EFFECT_APPLIED, id="intoxicated", definition=...)

    def my_handler(event: ConditionEvent):
        print(f"{event.data['id']} applied!")
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Notifications the condition core can publish."""

    # Effect lifecycle
    EFFECT_APPLIED = "effect.applied"
    EFFECT_REMOVED = "effect.removed"
    PARTICLE_CUE = "effect.particle"
    WITHDRAWAL_WARNING = "withdrawal.warning"

    # Cravings
    CRAVING_RESISTED = "craving.resisted"
    CRAVING_SUCCUMBED = "craving.succumbed"
    CRAVING_CONSUMED = "craving.consumed"

    # Addiction
    ADDICTION_CHANGED = "addiction.changed"
    ADDICTION_RECOVERED = "addiction.recovered"

    # Ancient voices
    ANCIENT_AWAKENED = "ancient.awakened"
    ANCIENT_SILENCED = "ancient.silenced"


@dataclass
class ConditionEvent:
    """
    Event payload for the event bus.

    Attributes:
        type: The event type (from EventType enum)
        data: Event-specific payload as dict
        session_id: Session the event belongs to
        timestamp: When the event was emitted
    """

    type: EventType
    data: dict = field(default_factory=dict)
    session_id: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"[{self.type.value}] {self.data}"


EventHandler = Callable[[ConditionEvent], None]


@runtime_checkable
class Publisher(Protocol):
    """Fire-and-forget notification port the systems depend on."""

    def emit(self, event_type: EventType, session_id: str = "", **data) -> object:
        ...


class EventBus:
    """
    Synchronous event bus.

    Listeners are called immediately on emit(). A failing listener is
    logged and skipped so it cannot break the tick that emitted.
    """

    def __init__(self, history_limit: int = 100):
        self._listeners: dict[EventType, list[EventHandler]] = {}
        self._history: list[ConditionEvent] = []
        self._history_limit = history_limit

    def on(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe to an event type."""
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        if handler not in self._listeners[event_type]:
            self._listeners[event_type].append(handler)

    def off(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe from an event type."""
        if event_type in self._listeners and handler in self._listeners[event_type]:
            self._listeners[event_type].remove(handler)

    def emit(
        self,
        event_type: EventType,
        session_id: str = "",
        **data,
    ) -> ConditionEvent:
        """
        Emit an event to all subscribers.

        Returns:
            The emitted ConditionEvent (for chaining/testing)
        """
        event = ConditionEvent(type=event_type, data=data, session_id=session_id)

        self._history.append(event)
        if len(self._history) > self._history_limit:
            self._history = self._history[-self._history_limit :]

        for handler in list(self._listeners.get(event_type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in handler for {event_type.value}: {e}")

        return event

    def clear(self) -> None:
        """Clear all listeners. Useful for testing."""
        self._listeners.clear()

    def clear_history(self) -> None:
        self._history.clear()

    def get_history(self, event_type: EventType | None = None) -> list[ConditionEvent]:
        """Recent events, optionally filtered by type."""
        if event_type is None:
            return list(self._history)
        return [e for e in self._history if e.type == event_type]

    def listener_count(self, event_type: EventType) -> int:
        return len(self._listeners.get(event_type, []))
