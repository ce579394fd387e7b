"""Craving resistance odds."""

from __future__ import annotations

from ..config import Config, resolve_config


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def resist_chance(
    volition_modifier: int,
    severity_level: int,
    config: Config | None = None,
) -> float:
    """
    Chance (0-1) to resist a craving.

    Base 30%, +10% per point of volition modifier, -10% per addiction
    level, clamped to [5%, 80%]. A misconfigured floor or ceiling is itself
    clamped into [0, 1] rather than rejected.
    """
    cfg = resolve_config(config)

    floor = _unit(cfg["resist_floor"])
    ceiling = _unit(cfg["resist_ceiling"])
    if floor > ceiling:
        floor, ceiling = ceiling, floor

    chance = cfg["base_resist_chance"]
    chance += volition_modifier * cfg["volition_weight"]
    chance -= severity_level * cfg["severity_weight"]

    return max(floor, min(ceiling, chance))
