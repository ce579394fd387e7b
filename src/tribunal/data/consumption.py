"""
Consumable → condition mapping and withdrawal follow-ups.

Durations are in message ticks.
"""

from .models import ConsumptionRule, WithdrawalRule


CONSUMPTION_RULES = [
    ConsumptionRule(
        category="cigarette",
        target_effect_id="smoking",
        duration_ticks=3,
        particle="smoke",
        quote="Oh yes. The sweet kiss of nicotine. Your old friend.",
    ),
    ConsumptionRule(
        category="alcohol",
        target_effect_id="intoxicated",
        duration_ticks=5,
        stackable=True,
        max_stacks=3,
        side_effect_id="manic",
        side_effect_chance=0.15,
        particle="drunk",
        quote="The warmth spreads through you. This is what living feels like.",
    ),
    ConsumptionRule(
        category="beer",
        target_effect_id="intoxicated",
        duration_ticks=3,
        stackable=True,
        max_stacks=3,
        particle="drunk",
        quote="Cheap, cold, and exactly what you needed.",
    ),
    ConsumptionRule(
        category="stimulant",
        target_effect_id="stimulated",
        duration_ticks=4,
        clears=("exhaustion",),
        particle="stimulant",
        quote="The world sharpens. Every detail crystalline.",
    ),
    ConsumptionRule(
        category="drug",
        target_effect_id="stimulated",
        duration_ticks=4,
        clears=("exhaustion",),
        particle="stimulant",
        quote="NEURONS FIRING. Time dilates. You are *awake*.",
    ),
    ConsumptionRule(
        category="pyrholidon",
        target_effect_id="dissociated",
        duration_ticks=6,
        side_effect_id="terrified",
        side_effect_chance=0.25,
        particle="pale",
        quote="Reality... bends. The Pale whispers at the edges.",
    ),
    ConsumptionRule(
        category="coffee",
        heal_morale=1,
        clears=("exhaustion",),
        quote="Caffeine. The socially acceptable stimulant.",
    ),
    ConsumptionRule(
        category="food",
        heal_health=1,
        heal_morale=1,
        clears=("starving",),
    ),
    ConsumptionRule(
        category="medicine",
        heal_health=2,
        clears=("wounded",),
    ),
]


WITHDRAWAL_RULES = [
    WithdrawalRule(
        expiring_effect_id="intoxicated",
        withdrawal_effect_id="hungover",
        duration_ticks=6,
    ),
    WithdrawalRule(
        expiring_effect_id="stimulated",
        withdrawal_effect_id="exhaustion",  # The crash
        duration_ticks=4,
    ),
    WithdrawalRule(
        expiring_effect_id="smoking",
        withdrawal_effect_id="nicotine_withdrawal",
        duration_ticks=3,
        addiction_category="nicotine",
        severity_threshold=2,
    ),
]
