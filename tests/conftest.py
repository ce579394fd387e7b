"""
Pytest fixtures for Tribunal condition tests.

Provides in-memory stores, an event bus with history, and a scripted
random source so probabilistic paths can be driven deterministically.
"""

import random

import pytest

from tribunal.state import (
    Addiction,
    EventBus,
    InventoryItem,
    MemorySessionStore,
    SessionManager,
)
from tribunal.systems import (
    AddictionTracker,
    CravingEngine,
    EffectSystem,
    SessionInventory,
    TickOrchestrator,
)


SESSION_ID = "test-session"


class ScriptedRandom(random.Random):
    """
    Random source with scripted draws.

    random() pops queued values (0.99 once the queue is empty, so nothing
    resisted and no side effect fires), randint() returns the lower bound
    and choice() the first element.
    """

    def __init__(self, *values: float):
        super().__init__(0)
        self.values = list(values)
        self.draws = 0

    def queue(self, *values: float) -> None:
        self.values.extend(values)

    def random(self) -> float:
        self.draws += 1
        if self.values:
            return self.values.pop(0)
        return 0.99

    def randint(self, a: int, b: int) -> int:
        return a

    def choice(self, seq):
        return seq[0]


def give_item(manager, name: str, item_type: str, quantity: int = 1) -> InventoryItem:
    """Put an item into the session inventory."""
    item = InventoryItem(name=name, type=item_type, quantity=quantity)
    manager.current.inventory.items.append(item)
    return item


def set_addiction(manager, category: str, level: int) -> None:
    manager.current.inventory.addictions[category] = Addiction(level=level)


def event_ids(bus: EventBus, event_type) -> list:
    """The ``id`` payloads of every recorded event of a type."""
    return [e.data.get("id") for e in bus.get_history(event_type)]


@pytest.fixture
def memory_store():
    """In-memory session store for testing."""
    return MemorySessionStore()


@pytest.fixture
def manager(memory_store):
    """Session manager with in-memory store."""
    return SessionManager(memory_store, SESSION_ID)


@pytest.fixture
def bus():
    """Event bus that keeps enough history for a long test."""
    return EventBus(history_limit=1000)


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def effects(manager, bus, rng):
    """Effect system over the in-memory session."""
    return EffectSystem(manager, bus, rng)


@pytest.fixture
def inventory(manager):
    return SessionInventory(manager)


@pytest.fixture
def cravings(manager, effects, inventory, bus, rng):
    """Craving engine wired to the same session as ``effects``."""
    return CravingEngine(manager, effects, inventory, bus, rng)


@pytest.fixture
def addictions(manager, bus, rng):
    return AddictionTracker(manager, bus, rng)


@pytest.fixture
def orchestrator(memory_store, bus, rng):
    """Full condition core for one session."""
    return TickOrchestrator(memory_store, SESSION_ID, publisher=bus, rng=rng)
