"""Addiction severity: escalation on use, decay while abstaining."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import Config, resolve_config
from ..data.addictions import ADDICTION_STAGES
from ..data.catalog import DEFAULT_CATALOG, EffectCatalog
from ..state.event_bus import EventBus, EventType, Publisher
from ..state.schema import Addiction, CravingTracker

if TYPE_CHECKING:
    from ..state.manager import SessionManager

logger = logging.getLogger(__name__)


@dataclass
class AddictionChange:
    success: bool
    category: str | None = None
    old_level: int = 0
    new_level: int = 0

    @property
    def changed(self) -> bool:
        return self.old_level != self.new_level


class AddictionTracker:
    """Severity bookkeeping for ``manager.current.inventory.addictions``."""

    def __init__(
        self,
        manager: "SessionManager",
        publisher: Publisher | None = None,
        rng: random.Random | None = None,
        catalog: EffectCatalog = DEFAULT_CATALOG,
        config: Config | None = None,
    ):
        self.manager = manager
        self.catalog = catalog
        self._publisher = publisher if publisher is not None else EventBus()
        self._rng = rng or random.Random()
        self._config = resolve_config(config)

    @property
    def _addictions(self) -> dict[str, Addiction]:
        return self.manager.current.inventory.addictions

    def get_level(self, category: str) -> int:
        addiction = self._addictions.get(category)
        return addiction.level if addiction else 0

    def record_use(self, item_type: str) -> AddictionChange:
        """
        Note one use of an item of ``item_type``.

        Raises the matching category's severity by one (capped), resets its
        decay counter and gives its craving tracker a fresh threshold.
        Non-addictive item types are a no-op with success=False.
        """
        category = self.catalog.addiction_for_item_type(item_type)
        if category is None:
            return AddictionChange(success=False)

        addiction = self._addictions.setdefault(category.id, Addiction())
        old_level = addiction.level
        addiction.level = min(addiction.level + 1, self._config["max_addiction_level"])
        addiction.messages_since_use = 0
        self._reset_tracker(category.id, create=True)

        self.manager.save()
        if addiction.level != old_level:
            self._emit_changed(category.id, old_level, addiction.level)
            logger.info(f"{category.id} addiction: {old_level} → {addiction.level}")

        return AddictionChange(
            success=True,
            category=category.id,
            old_level=old_level,
            new_level=addiction.level,
        )

    def decay(self) -> list[AddictionChange]:
        """Advance abstinence counters one tick; drop a level at the threshold."""
        threshold = self._config["addiction_decay_threshold"]
        changes = []

        for category in self.catalog.addictions:
            addiction = self._addictions.get(category.id)
            if addiction is None or addiction.level < 1:
                continue

            addiction.messages_since_use += 1
            if addiction.messages_since_use < threshold:
                continue

            old_level = addiction.level
            addiction.level -= 1
            addiction.messages_since_use = 0
            changes.append(AddictionChange(
                success=True,
                category=category.id,
                old_level=old_level,
                new_level=addiction.level,
            ))
            self._emit_changed(category.id, old_level, addiction.level)
            if addiction.level == 0:
                self._reset_tracker(category.id)
                self._emit(EventType.ADDICTION_RECOVERED, category=category.id)
                logger.info(f"Recovered from {category.id} addiction")

        if changes:
            self.manager.save()
        return changes

    def set_level(self, category: str, level: int) -> AddictionChange:
        """Debug setter. Level is clamped to [0, max]."""
        if self.catalog.get_addiction(category) is None:
            return AddictionChange(success=False, category=category)

        addiction = self._addictions.setdefault(category, Addiction())
        old_level = addiction.level
        addiction.level = max(0, min(level, self._config["max_addiction_level"]))
        addiction.messages_since_use = 0
        if addiction.level == 0:
            self._reset_tracker(category)

        self.manager.save()
        if addiction.level != old_level:
            self._emit_changed(category, old_level, addiction.level)
        return AddictionChange(
            success=True,
            category=category,
            old_level=old_level,
            new_level=addiction.level,
        )

    def _reset_tracker(self, category: str, create: bool = False) -> None:
        """Zero the craving count and draw a fresh threshold. Trackers are never dropped."""
        cravings = self.manager.current.cravings
        tracker = cravings.get(category)
        if tracker is None:
            if not create:
                return
            tracker = cravings[category] = CravingTracker()

        low = self._config["craving_delay_min"]
        high = max(low, self._config["craving_delay_max"])
        tracker.messages_since_use = 0
        tracker.next_craving_at = max(1, self._rng.randint(low, high))

    def _emit_changed(self, category: str, old_level: int, new_level: int) -> None:
        title, message = ADDICTION_STAGES.get(new_level, ("", ""))
        self._emit(
            EventType.ADDICTION_CHANGED,
            category=category,
            old_level=old_level,
            new_level=new_level,
            title=title,
            message=message,
        )

    def _emit(self, event_type: EventType, **data) -> None:
        self._publisher.emit(event_type, session_id=self.manager.session_id, **data)
