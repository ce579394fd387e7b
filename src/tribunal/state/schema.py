"""
Pydantic models for Tribunal session state.

This is the persisted shape of one chat session: vitals with their active
conditions, the inventory with addiction levels, and craving trackers.
Field aliases keep the JSON keys the host already stores
(``activeEffects``, ``remainingMessages``...); Python code uses snake_case.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from uuid import uuid4

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return str(uuid4())[:8]


class _StateModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# -----------------------------------------------------------------------------
# Vitals
# -----------------------------------------------------------------------------

class ActiveEffect(_StateModel):
    """A live, time-limited condition on the tracked persona."""
    id: str
    remaining_messages: int = Field(alias="remainingMessages", ge=1)
    stacks: int = Field(default=1, ge=1)
    source: str = "manual"  # Consumable category, "withdrawal", "toggle"...


class Vitals(_StateModel):
    health: int = 13
    max_health: int = Field(default=13, alias="maxHealth")
    morale: int = 13
    max_morale: int = Field(default=13, alias="maxMorale")
    active_effects: list[ActiveEffect] = Field(default_factory=list, alias="activeEffects")
    archetype: str | None = None  # Selected archetype slot, not time-limited

    @field_validator("active_effects", mode="before")
    @classmethod
    def _drop_corrupt_effects(cls, value: Any) -> list:
        """A missing or corrupt instance list loads as nothing active."""
        if value is None:
            return []
        if not isinstance(value, list):
            logger.warning(f"Discarding non-list activeEffects: {type(value).__name__}")
            return []

        kept = []
        for raw in value:
            if isinstance(raw, ActiveEffect):
                kept.append(raw)
                continue
            try:
                kept.append(ActiveEffect.model_validate(raw))
            except ValidationError:
                logger.warning(f"Dropping malformed active effect: {raw!r}")
        return kept

    def find_effect(self, effect_id: str) -> ActiveEffect | None:
        return next((e for e in self.active_effects if e.id == effect_id), None)


# -----------------------------------------------------------------------------
# Inventory & Addiction
# -----------------------------------------------------------------------------

class InventoryItem(_StateModel):
    """An item the persona carries. Extra host keys are preserved."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(default_factory=generate_id)
    name: str
    type: str = "other"
    quantity: int = Field(default=1, ge=0)


class Addiction(_StateModel):
    """Severity 0 means clean and disables cravings for the category."""
    level: int = Field(default=0, ge=0)
    messages_since_use: int = Field(default=0, alias="messagesSinceUse")  # Decay counter


class Inventory(_StateModel):
    items: list[InventoryItem] = Field(default_factory=list)
    addictions: dict[str, Addiction] = Field(default_factory=dict)

    def find_item(self, name: str) -> InventoryItem | None:
        name_lower = name.lower()
        return next(
            (i for i in self.items if i.name.lower() == name_lower and i.quantity > 0),
            None,
        )


class CravingTracker(_StateModel):
    messages_since_use: int = Field(default=0, alias="messagesSinceUse")
    next_craving_at: int = Field(default=2, alias="nextCravingAt")


# -----------------------------------------------------------------------------
# Session
# -----------------------------------------------------------------------------

class SessionState(_StateModel):
    """Everything this core reads and writes for one session."""
    id: str = Field(default_factory=generate_id)
    vitals: Vitals = Field(default_factory=Vitals)
    inventory: Inventory = Field(default_factory=Inventory)
    cravings: dict[str, CravingTracker] = Field(default_factory=dict)
    message_count: int = Field(default=0, alias="messageCount")
    updated_at: datetime = Field(default_factory=datetime.now, alias="updatedAt")

    def touch(self) -> None:
        self.updated_at = datetime.now()
