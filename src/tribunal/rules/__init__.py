"""Condition rules as pure functions."""

from .ancient import resolve, combinator_members_active
from .modifiers import add_definition, sum_modifiers
from .resistance import resist_chance

__all__ = [
    "resolve",
    "combinator_members_active",
    "add_definition",
    "sum_modifiers",
    "resist_chance",
]
