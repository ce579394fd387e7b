"""
Ancient voices: primal constructs older than the 24 skills.

TRIGGER RULES:
- The single "exact" condition wakes the reptilian brain AND the limbic
  system together. It is the only way either of them speaks.
- The party set wakes the spinal cord when any two of its members are active.
"""

from .models import CombinatorSet, DeepEffect
from .statuses import PARTY_SET


DEEP_EFFECTS = [
    DeepEffect(
        id="ancient_reptilian_brain",
        name="Ancient Reptilian Brain",
        description="Survival. Fear. Hunger. The cold logic of a predator.",
    ),
    DeepEffect(
        id="limbic_system",
        name="Limbic System",
        description="Your emotional core. Memory. Feeling.",
    ),
    DeepEffect(
        id="spinal_cord",
        name="Spinal Cord",
        description="Pure reaction. No thought, only motion. The party never stops.",
    ),
]

# Always activated together, never one without the other
EXACT_PAIR = ("ancient_reptilian_brain", "limbic_system")

COMBINATOR_SETS = [
    CombinatorSet(
        name=PARTY_SET,
        members=("intoxicated", "stimulated", "manic"),
        min_active=2,
        deep_effect_id="spinal_cord",
    ),
]
