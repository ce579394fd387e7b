"""Session-scoped condition services."""

from .effects import ApplyResult, EffectSystem, RemoveResult, TickExpiry, WithdrawalResult
from .cravings import CravingEngine, CravingOutcome
from .addiction import AddictionChange, AddictionTracker
from .voices import AncientVoiceMonitor
from .modifiers import SkillModifierAggregator
from .inventory import InventoryService, SessionInventory
from .ticks import ConsumeResult, TickOrchestrator, TickResult

__all__ = [
    # Effects
    "ApplyResult",
    "EffectSystem",
    "RemoveResult",
    "TickExpiry",
    "WithdrawalResult",
    # Cravings
    "CravingEngine",
    "CravingOutcome",
    # Addiction
    "AddictionChange",
    "AddictionTracker",
    # Voices & modifiers
    "AncientVoiceMonitor",
    "SkillModifierAggregator",
    # Inventory
    "InventoryService",
    "SessionInventory",
    # Orchestration
    "ConsumeResult",
    "TickOrchestrator",
    "TickResult",
]
