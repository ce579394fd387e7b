"""
Effect catalog: the static tables the condition systems look things up in.

Built once at import. Structural mistakes (an archetype without an exclusion
group, a combinator naming an unknown effect...) raise ValueError here so
they surface at startup. Rules that point at unknown effects are only
logged; at runtime those lookups miss and the operation degrades to a no-op.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .addictions import ADDICTION_CATEGORIES
from .ancient import COMBINATOR_SETS, DEEP_EFFECTS, EXACT_PAIR
from .consumption import CONSUMPTION_RULES, WITHDRAWAL_RULES
from .models import (
    EXACT_TRIGGER,
    AddictionCategory,
    CombinatorSet,
    ConsumptionRule,
    DeepEffect,
    EffectCategory,
    EffectDefinition,
    WithdrawalRule,
)
from .statuses import STATUS_EFFECTS

logger = logging.getLogger(__name__)


class EffectCatalog:
    """Read-only lookups over effects, rules, addictions and deep effects."""

    def __init__(
        self,
        effects: Iterable[EffectDefinition],
        consumption_rules: Iterable[ConsumptionRule],
        withdrawal_rules: Iterable[WithdrawalRule],
        addictions: Iterable[AddictionCategory],
        deep_effects: Iterable[DeepEffect],
        exact_pair: tuple[str, str],
        combinator_sets: Iterable[CombinatorSet],
    ):
        self._effects = _index(effects, lambda e: e.id, "effect")
        self._rules = _index(consumption_rules, lambda r: r.category, "consumption rule")
        self._withdrawals = _index(withdrawal_rules, lambda w: w.expiring_effect_id, "withdrawal rule")
        self._addictions = _index(addictions, lambda a: a.id, "addiction category")
        self._deep_effects = _index(deep_effects, lambda d: d.id, "deep effect")
        self._exact_pair = tuple(exact_pair)
        self._combinators = tuple(combinator_sets)

        self._item_type_to_addiction: dict[str, str] = {}
        for addiction in self._addictions.values():
            for item_type in addiction.item_types:
                self._item_type_to_addiction[item_type] = addiction.id

        self._validate()

    # ─── Validation ─────────────────────────────────────────────

    def _validate(self) -> None:
        for effect in self._effects.values():
            if effect.category == EffectCategory.ARCHETYPE and not effect.exclusion_group:
                raise ValueError(f"Archetype {effect.id} has no exclusion group")

        if len(self._exact_pair) != 2:
            raise ValueError("Exact trigger must activate exactly two deep effects")
        for deep_id in self._exact_pair:
            if deep_id not in self._deep_effects:
                raise ValueError(f"Exact pair names unknown deep effect: {deep_id}")

        set_names = set()
        for combo in self._combinators:
            set_names.add(combo.name)
            if combo.deep_effect_id not in self._deep_effects:
                raise ValueError(f"Combinator {combo.name} names unknown deep effect: {combo.deep_effect_id}")
            if not 1 <= combo.min_active <= len(combo.members):
                raise ValueError(f"Combinator {combo.name} needs 1..{len(combo.members)} members")
            for member in combo.members:
                effect = self._effects.get(member)
                if effect is None:
                    raise ValueError(f"Combinator {combo.name} names unknown effect: {member}")
                if effect.ancient_voice_trigger != combo.name:
                    raise ValueError(f"Effect {member} is not marked for combinator {combo.name}")

        for effect in self._effects.values():
            trigger = effect.ancient_voice_trigger
            if trigger and trigger != EXACT_TRIGGER and trigger not in set_names:
                raise ValueError(f"Effect {effect.id} names unknown combinator set: {trigger}")

        # Dangling references are tolerated and degrade at runtime
        for rule in self._rules.values():
            for ref in (rule.target_effect_id, rule.side_effect_id, *rule.clears):
                if ref and ref not in self._effects:
                    logger.warning(f"Consumption rule {rule.category} references unknown effect {ref}")
        for rule in self._withdrawals.values():
            if rule.withdrawal_effect_id and rule.withdrawal_effect_id not in self._effects:
                logger.warning(
                    f"Withdrawal rule for {rule.expiring_effect_id} references "
                    f"unknown effect {rule.withdrawal_effect_id}"
                )

    # ─── Lookups ────────────────────────────────────────────────

    def get_effect(self, effect_id: str) -> EffectDefinition | None:
        return self._effects.get(effect_id)

    def get_rule(self, category: str) -> ConsumptionRule | None:
        return self._rules.get(category)

    def get_withdrawal(self, effect_id: str) -> WithdrawalRule | None:
        return self._withdrawals.get(effect_id)

    def get_addiction(self, category: str) -> AddictionCategory | None:
        return self._addictions.get(category)

    def get_deep_effect(self, deep_id: str) -> DeepEffect | None:
        return self._deep_effects.get(deep_id)

    def addiction_for_item_type(self, item_type: str) -> AddictionCategory | None:
        category = self._item_type_to_addiction.get(item_type)
        return self._addictions.get(category) if category else None

    @property
    def effects(self) -> list[EffectDefinition]:
        return list(self._effects.values())

    @property
    def addictions(self) -> list[AddictionCategory]:
        """Addiction categories in stable catalog order."""
        return list(self._addictions.values())

    @property
    def archetypes(self) -> list[EffectDefinition]:
        return [e for e in self._effects.values() if e.category == EffectCategory.ARCHETYPE]

    @property
    def exact_triggers(self) -> frozenset[str]:
        return frozenset(
            e.id for e in self._effects.values()
            if e.ancient_voice_trigger == EXACT_TRIGGER
        )

    @property
    def exact_pair(self) -> tuple[str, ...]:
        return self._exact_pair

    @property
    def combinator_sets(self) -> tuple[CombinatorSet, ...]:
        return self._combinators


def _index(items, key, label: str) -> dict:
    indexed = {}
    for item in items:
        k = key(item)
        if k in indexed:
            raise ValueError(f"Duplicate {label}: {k}")
        indexed[k] = item
    return indexed


def build_default_catalog() -> EffectCatalog:
    return EffectCatalog(
        effects=STATUS_EFFECTS,
        consumption_rules=CONSUMPTION_RULES,
        withdrawal_rules=WITHDRAWAL_RULES,
        addictions=ADDICTION_CATEGORIES,
        deep_effects=DEEP_EFFECTS,
        exact_pair=EXACT_PAIR,
        combinator_sets=COMBINATOR_SETS,
    )


DEFAULT_CATALOG = build_default_catalog()
