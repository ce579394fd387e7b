"""
Immutable catalog definitions.

Loaded once at import, never mutated. Rule objects reference effects by id;
EffectCatalog checks those references when it is built.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .skills import Skill


class EffectCategory(str, Enum):
    PHYSICAL = "physical"
    MENTAL = "mental"
    ARCHETYPE = "archetype"   # Mutually exclusive identity states


EXACT_TRIGGER = "exact"


class _Definition(BaseModel):
    model_config = ConfigDict(frozen=True)


class EffectDefinition(_Definition):
    """A condition that modifies skills while active."""
    id: str
    display_name: str
    simple_name: str  # Shown while the condition is inactive
    category: EffectCategory
    boosts: tuple[Skill, ...] = ()
    debuffs: tuple[Skill, ...] = ()
    exclusion_group: str | None = None  # At most one active instance per group
    # None, "exact" (sole gateway for the fixed deep pair), or a combinator set name
    ancient_voice_trigger: str | None = None
    description: str = ""


class ConsumptionRule(_Definition):
    """What consuming one item of a category does."""
    category: str
    target_effect_id: str | None = None  # None = pure heal, no condition
    duration_ticks: int = Field(default=0, ge=0)
    stackable: bool = False
    max_stacks: int = Field(default=1, ge=1)
    clears: tuple[str, ...] = ()
    side_effect_id: str | None = None
    side_effect_chance: float = 0.0
    heal_health: int = 0
    heal_morale: int = 0
    particle: str | None = None  # Cosmetic cue tag for the visual layer
    quote: str | None = None


class WithdrawalRule(_Definition):
    """
    What follows when a condition expires on its own.

    With ``severity_threshold`` set, the withdrawal effect only lands when the
    addiction in ``addiction_category`` is above the threshold; otherwise the
    expiry is flagged with a warning notification.
    """
    expiring_effect_id: str
    withdrawal_effect_id: str | None = None
    duration_ticks: int = Field(default=1, ge=1)
    addiction_category: str | None = None
    severity_threshold: int | None = None

    @property
    def is_threshold_check(self) -> bool:
        return self.severity_threshold is not None


class AddictionCategory(_Definition):
    """An addictive substance class and the inventory types that feed it."""
    id: str
    name: str
    item_types: tuple[str, ...]
    resist_quotes: tuple[str, ...]
    succumb_quotes: tuple[str, ...]
    consume_message: str = ""


class DeepEffect(_Definition):
    """Secondary-tier effect derived from the set of active conditions."""
    id: str
    name: str
    description: str = ""


class CombinatorSet(_Definition):
    """Any ``min_active`` of ``members`` active lights up ``deep_effect_id``."""
    name: str
    members: tuple[str, ...]
    min_active: int = 2
    deep_effect_id: str
