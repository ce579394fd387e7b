"""Skill modifier aggregation over conditions and the archetype slot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..data.catalog import DEFAULT_CATALOG, EffectCatalog
from ..rules.modifiers import add_definition, sum_modifiers

if TYPE_CHECKING:
    from ..data.skills import Skill
    from ..state.manager import SessionManager


class SkillModifierAggregator:
    """
    Read-only view of net skill modifiers for a session.

    Recomputed on every query; nothing is cached.
    """

    def __init__(self, manager: "SessionManager", catalog: EffectCatalog = DEFAULT_CATALOG):
        self.manager = manager
        self.catalog = catalog

    def get_all_modifiers(self) -> dict["Skill", int]:
        vitals = self.manager.current.vitals
        modifiers = sum_modifiers(vitals.active_effects, self.catalog)

        if vitals.archetype:
            archetype = self.catalog.get_effect(vitals.archetype)
            if archetype is not None:
                add_definition(modifiers, archetype, 1)

        return modifiers

    def get_modifier(self, skill: "Skill") -> int:
        return self.get_all_modifiers().get(skill, 0)
