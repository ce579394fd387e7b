"""Static condition catalog."""

from .skills import Skill, RESIST_SKILL
from .models import (
    AddictionCategory,
    CombinatorSet,
    ConsumptionRule,
    DeepEffect,
    EffectCategory,
    EffectDefinition,
    WithdrawalRule,
)
from .catalog import EffectCatalog, DEFAULT_CATALOG, build_default_catalog
from .addictions import ADDICTION_STAGES

__all__ = [
    "Skill",
    "RESIST_SKILL",
    "AddictionCategory",
    "CombinatorSet",
    "ConsumptionRule",
    "DeepEffect",
    "EffectCategory",
    "EffectDefinition",
    "WithdrawalRule",
    "EffectCatalog",
    "DEFAULT_CATALOG",
    "build_default_catalog",
    "ADDICTION_STAGES",
]
