"""
Skill modifier arithmetic as pure functions.

Each boost contributes +weight and each debuff -weight, where weight is the
instance's stack count (1 for the archetype slot).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..data.catalog import DEFAULT_CATALOG, EffectCatalog
from ..data.skills import Skill

if TYPE_CHECKING:
    from ..data.models import EffectDefinition
    from ..state.schema import ActiveEffect


def add_definition(
    modifiers: dict[Skill, int],
    definition: "EffectDefinition",
    weight: int = 1,
) -> dict[Skill, int]:
    """Fold one definition into ``modifiers`` in place and return it."""
    for skill in definition.boosts:
        modifiers[skill] = modifiers.get(skill, 0) + weight
    for skill in definition.debuffs:
        modifiers[skill] = modifiers.get(skill, 0) - weight
    return modifiers


def sum_modifiers(
    instances: Iterable["ActiveEffect"],
    catalog: EffectCatalog = DEFAULT_CATALOG,
) -> dict[Skill, int]:
    """Total skill modifiers over active instances. Unknown ids are skipped."""
    modifiers: dict[Skill, int] = {}
    for instance in instances:
        definition = catalog.get_effect(instance.id)
        if definition is None:
            continue
        add_definition(modifiers, definition, instance.stacks)
    return modifiers
