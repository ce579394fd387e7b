"""
Ancient voice trigger resolution as a pure function.

The result depends only on which condition ids are active, never on the
order they became active in, so it is safe to call after every change.
"""

from __future__ import annotations

from typing import Iterable

from ..data.catalog import DEFAULT_CATALOG, EffectCatalog


def resolve(
    active_effect_ids: Iterable[str],
    catalog: EffectCatalog = DEFAULT_CATALOG,
) -> frozenset[str]:
    """
    Decide which deep effects are active for a set of active conditions.

    Two independent rules:
    - Exact source: any condition marked "exact" activates the fixed pair
      together. Nothing else can activate either member of the pair.
    - Combinator: a set activates its deep effect when at least
      ``min_active`` of its members are active. All members active still
      yields a single activation.

    Args:
        active_effect_ids: Ids of currently active conditions
        catalog: Catalog to read trigger markings from

    Returns:
        Ids of the deep effects that should be considered active
    """
    active = frozenset(active_effect_ids)
    deep: set[str] = set()

    if active & catalog.exact_triggers:
        deep.update(catalog.exact_pair)

    for combo in catalog.combinator_sets:
        present = sum(1 for member in combo.members if member in active)
        if present >= combo.min_active:
            deep.add(combo.deep_effect_id)

    return frozenset(deep)


def combinator_members_active(
    active_effect_ids: Iterable[str],
    catalog: EffectCatalog = DEFAULT_CATALOG,
) -> dict[str, list[str]]:
    """Which members of each combinator set are active, by set name."""
    active = frozenset(active_effect_ids)
    return {
        combo.name: [m for m in combo.members if m in active]
        for combo in catalog.combinator_sets
    }
