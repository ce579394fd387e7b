"""
User configuration persistence.

Stores tuning for the craving and addiction systems in a JSON file next to
the session saves. Missing keys fall back to defaults.
"""

import json
from pathlib import Path
from typing import TypedDict


class Config(TypedDict, total=False):
    """User configuration."""
    auto_consume: bool  # Cravings may auto-consume held items
    craving_delay_min: int  # Ticks before a craving, lower bound
    craving_delay_max: int  # Ticks before a craving, upper bound
    base_resist_chance: float
    volition_weight: float  # Resist chance per point of volition modifier
    severity_weight: float  # Resist chance lost per addiction level
    resist_floor: float
    resist_ceiling: float
    max_addiction_level: int
    addiction_decay_threshold: int  # Quiet ticks before severity drops by one
    toggle_duration: int  # Ticks a manually toggled condition lasts
    consumed_notice_delay_ms: int  # Host delay for the "item consumed" follow-up


DEFAULT_CONFIG: Config = {
    "auto_consume": True,
    "craving_delay_min": 2,
    "craving_delay_max": 3,
    "base_resist_chance": 0.30,
    "volition_weight": 0.10,
    "severity_weight": 0.10,
    "resist_floor": 0.05,
    "resist_ceiling": 0.80,
    "max_addiction_level": 5,
    "addiction_decay_threshold": 15,
    "toggle_duration": 5,
    "consumed_notice_delay_ms": 1500,
}


def get_config_path(sessions_dir: Path | str = "sessions") -> Path:
    """Get path to config file."""
    return Path(sessions_dir) / ".tribunal_config.json"


def load_config(sessions_dir: Path | str = "sessions") -> Config:
    """Load config from file, or return defaults if not found."""
    path = get_config_path(sessions_dir)

    if not path.exists():
        return DEFAULT_CONFIG.copy()

    try:
        with open(path, "r", encoding="utf-8") as f:
            saved = json.load(f)
        # Merge with defaults to handle missing keys
        config = DEFAULT_CONFIG.copy()
        if isinstance(saved, dict):
            config.update({k: v for k, v in saved.items() if k in DEFAULT_CONFIG})
        return config
    except (OSError, ValueError):
        return DEFAULT_CONFIG.copy()


def save_config(config: Config, sessions_dir: Path | str = "sessions") -> bool:
    """Save config to file. Returns True on success."""
    path = get_config_path(sessions_dir)
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        return True
    except IOError:
        return False


def set_auto_consume(enabled: bool, sessions_dir: Path | str = "sessions") -> None:
    """Save auto-consume preference."""
    config = load_config(sessions_dir)
    config["auto_consume"] = enabled
    save_config(config, sessions_dir)


def resolve_config(config: Config | None) -> Config:
    """Fill a partial config with defaults."""
    merged = DEFAULT_CONFIG.copy()
    if config:
        merged.update(config)
    return merged
