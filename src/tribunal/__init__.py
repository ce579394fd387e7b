"""
Tribunal conditions: status effects, cravings and ancient voices.

Tick-driven condition core for a Disco Elysium style persona. The host
raises one message tick per exchange and wires the publisher to its own
notification surface.
"""

from .config import DEFAULT_CONFIG, Config, load_config, save_config
from .state import EventBus, EventType, JsonSessionStore, MemorySessionStore
from .systems import TickOrchestrator

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
    "EventBus",
    "EventType",
    "JsonSessionStore",
    "MemorySessionStore",
    "TickOrchestrator",
]
