"""Tests for the static effect catalog."""

import pytest

from tribunal.data import (
    DEFAULT_CATALOG,
    AddictionCategory,
    CombinatorSet,
    ConsumptionRule,
    EffectCatalog,
    EffectCategory,
    EffectDefinition,
    Skill,
)
from tribunal.data.ancient import DEEP_EFFECTS, EXACT_PAIR


def definition(effect_id: str, **kwargs) -> EffectDefinition:
    kwargs.setdefault("category", EffectCategory.PHYSICAL)
    return EffectDefinition(
        id=effect_id,
        display_name=effect_id.title(),
        simple_name=effect_id,
        **kwargs,
    )


def build(effects, combinator_sets=(), exact_pair=EXACT_PAIR, consumption_rules=()):
    return EffectCatalog(
        effects=effects,
        consumption_rules=consumption_rules,
        withdrawal_rules=[],
        addictions=[],
        deep_effects=DEEP_EFFECTS,
        exact_pair=exact_pair,
        combinator_sets=combinator_sets,
    )


class TestDefaultCatalog:
    """Test the shipped content."""

    def test_archetypes_exclusive(self):
        archetypes = DEFAULT_CATALOG.archetypes

        assert len(archetypes) == 6
        assert {a.exclusion_group for a in archetypes} == {"archetype"}

    def test_only_archetypes_grouped(self):
        for effect in DEFAULT_CATALOG.effects:
            if effect.category != EffectCategory.ARCHETYPE:
                assert effect.exclusion_group is None

    def test_single_exact_trigger(self):
        assert DEFAULT_CATALOG.exact_triggers == frozenset({"dissociated"})

    def test_party_set(self):
        (party,) = DEFAULT_CATALOG.combinator_sets

        assert set(party.members) == {"intoxicated", "stimulated", "manic"}
        assert party.min_active == 2
        assert party.deep_effect_id == "spinal_cord"

    def test_addiction_order(self):
        assert [a.id for a in DEFAULT_CATALOG.addictions] == ["nicotine", "alcohol", "drugs"]

    def test_item_type_lookup(self):
        assert DEFAULT_CATALOG.addiction_for_item_type("beer").id == "alcohol"
        assert DEFAULT_CATALOG.addiction_for_item_type("pyrholidon").id == "drugs"
        assert DEFAULT_CATALOG.addiction_for_item_type("food") is None

    def test_rules_reference_known_effects(self):
        for category in ("cigarette", "alcohol", "beer", "stimulant", "drug", "pyrholidon"):
            rule = DEFAULT_CATALOG.get_rule(category)
            assert DEFAULT_CATALOG.get_effect(rule.target_effect_id) is not None

    def test_heal_rules_have_no_target(self):
        for category in ("coffee", "food", "medicine"):
            assert DEFAULT_CATALOG.get_rule(category).target_effect_id is None

    def test_nicotine_withdrawal_is_threshold_check(self):
        rule = DEFAULT_CATALOG.get_withdrawal("smoking")

        assert rule.is_threshold_check
        assert rule.severity_threshold == 2

    def test_lookup_misses_return_none(self):
        assert DEFAULT_CATALOG.get_effect("sleepy") is None
        assert DEFAULT_CATALOG.get_rule("lint") is None
        assert DEFAULT_CATALOG.get_withdrawal("lucky") is None
        assert DEFAULT_CATALOG.get_addiction("gambling") is None

    def test_volition_sources(self):
        boosting = {e.id for e in DEFAULT_CATALOG.effects if Skill.VOLITION in e.boosts}

        assert {"smoking", "stimulated"} <= boosting

    def test_definitions_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_CATALOG.get_effect("smoking").id = "other"


class TestCatalogValidation:
    """Structural mistakes raise at construction."""

    def test_archetype_needs_group(self):
        with pytest.raises(ValueError):
            build([definition("detective", category=EffectCategory.ARCHETYPE)])

    def test_duplicate_ids(self):
        with pytest.raises(ValueError):
            build([definition("a"), definition("a")])

    def test_exact_pair_must_be_known(self):
        with pytest.raises(ValueError):
            build([], exact_pair=("ancient_reptilian_brain", "pineal_gland"))

    def test_combinator_unknown_member(self):
        combo = CombinatorSet(name="party", members=("a", "ghost"), deep_effect_id="spinal_cord")

        with pytest.raises(ValueError):
            build([definition("a", ancient_voice_trigger="party")], [combo])

    def test_combinator_member_must_be_marked(self):
        combo = CombinatorSet(name="party", members=("a", "b"), deep_effect_id="spinal_cord")

        with pytest.raises(ValueError):
            build([definition("a", ancient_voice_trigger="party"), definition("b")], [combo])

    def test_unknown_set_name(self):
        with pytest.raises(ValueError):
            build([definition("a", ancient_voice_trigger="rave")])

    def test_dangling_rule_tolerated(self):
        catalog = build(
            [definition("a")],
            consumption_rules=[ConsumptionRule(category="x", target_effect_id="ghost", duration_ticks=2)],
        )

        assert catalog.get_rule("x") is not None

    def test_addiction_needs_unique_id(self):
        nicotine = AddictionCategory(
            id="nicotine", name="Nicotine", item_types=("cigarette",),
            resist_quotes=(), succumb_quotes=(),
        )

        with pytest.raises(ValueError):
            EffectCatalog(
                effects=[], consumption_rules=[], withdrawal_rules=[],
                addictions=[nicotine, nicotine], deep_effects=DEEP_EFFECTS,
                exact_pair=EXACT_PAIR, combinator_sets=[],
            )
