"""
Tests for condition rules as pure functions.

These run without any session state: resistance odds, ancient voice
resolution and modifier arithmetic.
"""

from itertools import product

import pytest

from tribunal.data import DEFAULT_CATALOG, Skill
from tribunal.rules import (
    add_definition,
    combinator_members_active,
    resist_chance,
    resolve,
    sum_modifiers,
)
from tribunal.state import ActiveEffect


PARTY = ("intoxicated", "stimulated", "manic")
EXACT_PAIR = {"ancient_reptilian_brain", "limbic_system"}


class TestResistChance:
    """Test resist_chance pure function."""

    def test_base_chance(self):
        assert resist_chance(0, 0) == pytest.approx(0.30)

    def test_volition_raises(self):
        assert resist_chance(2, 0) == pytest.approx(0.50)

    def test_severity_lowers(self):
        assert resist_chance(0, 1) == pytest.approx(0.20)

    def test_severity_three_hits_floor(self):
        assert resist_chance(0, 3) == pytest.approx(0.05)

    @pytest.mark.parametrize("volition, severity", [
        (-10, 10),
        (10, 0),
        (100, -100),
        (-100, 100),
        (0, 5),
    ])
    def test_always_within_bounds(self, volition, severity):
        """Extreme inputs are clamped to [0.05, 0.80]."""
        assert 0.05 <= resist_chance(volition, severity) <= 0.80

    def test_ceiling(self):
        assert resist_chance(10, 0) == pytest.approx(0.80)

    def test_bad_config_clamped_to_unit(self):
        """Floor and ceiling outside [0, 1] are clamped, not rejected."""
        config = {"resist_floor": -0.5, "resist_ceiling": 1.7}

        assert resist_chance(-100, 100, config) == 0.0
        assert resist_chance(100, 0, config) == 1.0

    def test_inverted_bounds_swapped(self):
        config = {"resist_floor": 0.9, "resist_ceiling": 0.1}

        assert resist_chance(0, 0, config) == pytest.approx(0.30)
        assert resist_chance(100, 0, config) == pytest.approx(0.9)


class TestResolve:
    """Test ancient voice resolution."""

    def test_nothing_active(self):
        assert resolve([]) == frozenset()

    def test_exact_trigger_activates_pair(self):
        assert resolve(["dissociated"]) == EXACT_PAIR

    @pytest.mark.parametrize("membership", list(product([False, True], repeat=3)))
    def test_combinator_needs_two_of_three(self, membership):
        """Spinal cord is active iff at least two party members are."""
        active = [effect for effect, on in zip(PARTY, membership) if on]

        deep = resolve(active)

        assert ("spinal_cord" in deep) == (sum(membership) >= 2)
        assert not deep & EXACT_PAIR

    def test_pair_never_half_active(self):
        """No combination of conditions yields just one member of the pair."""
        ids = [e.id for e in DEFAULT_CATALOG.effects]
        for first in ids:
            for second in ids:
                deep = resolve([first, second])
                assert len(deep & EXACT_PAIR) in (0, 2)

    def test_independent_rules(self):
        deep = resolve(["dissociated", "intoxicated", "manic"])

        assert deep == EXACT_PAIR | {"spinal_cord"}

    def test_removing_member_deactivates(self):
        assert "spinal_cord" in resolve(["intoxicated", "stimulated"])
        assert "spinal_cord" not in resolve(["intoxicated"])

    def test_order_independent(self):
        assert resolve(["manic", "stimulated"]) == resolve(["stimulated", "manic"])

    def test_members_active(self):
        members = combinator_members_active(["manic", "lucky", "intoxicated"])

        assert members == {"party": ["intoxicated", "manic"]}


class TestModifiers:
    """Test modifier arithmetic."""

    def test_add_definition(self):
        definition = DEFAULT_CATALOG.get_effect("smoking")

        modifiers = add_definition({}, definition)

        assert modifiers[Skill.VOLITION] == 1
        assert modifiers[Skill.ENDURANCE] == -1

    def test_weight(self):
        definition = DEFAULT_CATALOG.get_effect("smoking")

        modifiers = add_definition({Skill.VOLITION: 1}, definition, weight=3)

        assert modifiers[Skill.VOLITION] == 4

    def test_sum_skips_unknown(self):
        instances = [
            ActiveEffect(id="smoking", remaining_messages=2),
            ActiveEffect(id="ghost", remaining_messages=2),
        ]

        modifiers = sum_modifiers(instances)

        assert modifiers == add_definition({}, DEFAULT_CATALOG.get_effect("smoking"))

    def test_sum_uses_stacks(self):
        instances = [ActiveEffect(id="intoxicated", remaining_messages=2, stacks=3)]

        assert sum_modifiers(instances)[Skill.DRAMA] == 3
