"""Ancient voice monitor: publishes deep effects waking up or going quiet."""

from __future__ import annotations

import logging
from typing import Iterable

from ..data.catalog import DEFAULT_CATALOG, EffectCatalog
from ..rules.ancient import combinator_members_active, resolve
from ..state.event_bus import EventBus, EventType, Publisher

logger = logging.getLogger(__name__)


class AncientVoiceMonitor:
    """Remembers the last resolution and reports only the transitions."""

    def __init__(
        self,
        publisher: Publisher | None = None,
        catalog: EffectCatalog = DEFAULT_CATALOG,
        session_id: str = "",
    ):
        self.catalog = catalog
        self.session_id = session_id
        self._publisher = publisher if publisher is not None else EventBus()
        self._active: frozenset[str] = frozenset()

    @property
    def active(self) -> frozenset[str]:
        return self._active

    def sync(self, active_effect_ids: Iterable[str]) -> frozenset[str]:
        """Adopt the current resolution without publishing (session load)."""
        self._active = resolve(active_effect_ids, self.catalog)
        return self._active

    def update(self, active_effect_ids: Iterable[str]) -> tuple[list[str], list[str]]:
        """
        Recompute deep effects for the given conditions.

        Returns:
            (awakened, silenced) deep effect ids, sorted
        """
        active = frozenset(active_effect_ids)
        current = resolve(active, self.catalog)
        awakened = sorted(current - self._active)
        silenced = sorted(self._active - current)
        self._active = current

        for deep_id in awakened:
            deep = self.catalog.get_deep_effect(deep_id)
            name = deep.name if deep else deep_id
            logger.info(f"Ancient voice awakened: {name}")
            self._publisher.emit(
                EventType.ANCIENT_AWAKENED,
                session_id=self.session_id,
                id=deep_id,
                name=name,
                sources=self._sources(active, deep_id),
            )
        for deep_id in silenced:
            logger.info(f"Ancient voice silenced: {deep_id}")
            self._publisher.emit(EventType.ANCIENT_SILENCED, session_id=self.session_id, id=deep_id)

        return awakened, silenced

    def _sources(self, active: frozenset[str], deep_id: str) -> list[str]:
        """Active conditions that woke ``deep_id``, sorted."""
        sources = set()
        if deep_id in self.catalog.exact_pair:
            sources.update(active & self.catalog.exact_triggers)
        members = combinator_members_active(active, self.catalog)
        for combo in self.catalog.combinator_sets:
            if combo.deep_effect_id == deep_id:
                sources.update(members[combo.name])
        return sorted(sources)
