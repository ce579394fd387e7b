"""Session state for Tribunal conditions."""

from .schema import (
    ActiveEffect,
    Addiction,
    CravingTracker,
    Inventory,
    InventoryItem,
    SessionState,
    Vitals,
)
from .manager import SessionManager
from .store import SessionStore, JsonSessionStore, MemorySessionStore
from .event_bus import (
    ConditionEvent,
    EventBus,
    EventType,
    Publisher,
)

__all__ = [
    # Schema
    "ActiveEffect",
    "Addiction",
    "CravingTracker",
    "Inventory",
    "InventoryItem",
    "SessionState",
    "Vitals",
    # Manager
    "SessionManager",
    # Store
    "SessionStore",
    "JsonSessionStore",
    "MemorySessionStore",
    # Event Bus
    "ConditionEvent",
    "EventBus",
    "EventType",
    "Publisher",
]
