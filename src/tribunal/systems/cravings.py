"""
Craving and resistance engine.

Once per message tick, after effect expiry, every addicted category
counts toward its next craving. At the threshold, if a matching item is
held, a volition-weighted resistance check decides between resisting
(next craving comes sooner) and auto-consuming the item.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import Config, resolve_config
from ..data.catalog import DEFAULT_CATALOG, EffectCatalog
from ..data.skills import RESIST_SKILL
from ..rules.resistance import resist_chance
from ..state.event_bus import EventBus, EventType, Publisher
from ..state.schema import CravingTracker

if TYPE_CHECKING:
    from ..data.models import AddictionCategory
    from ..state.manager import SessionManager
    from ..state.schema import InventoryItem
    from .effects import ApplyResult, EffectSystem
    from .inventory import InventoryService

logger = logging.getLogger(__name__)


# Outcome statuses
WAITING = "waiting"
NO_ITEM = "no_item"
RESISTED = "resisted"
SUCCUMBED = "succumbed"
CONSUME_FAILED = "consume_failed"


@dataclass
class CravingOutcome:
    """What one addicted category did this tick."""
    category: str
    status: str
    success: bool = True
    item: str | None = None
    item_type: str | None = None
    chance: float | None = None
    quote: str | None = None
    apply_result: "ApplyResult | None" = None


class CravingEngine:
    """
    Drives cravings for every addicted category of one session.

    ``process_tick()`` is the only entry point; categories are visited
    in catalog order so outcomes are deterministic for a seeded rng.
    """

    def __init__(
        self,
        manager: "SessionManager",
        effects: "EffectSystem",
        inventory: "InventoryService",
        publisher: Publisher | None = None,
        rng: random.Random | None = None,
        catalog: EffectCatalog = DEFAULT_CATALOG,
        config: Config | None = None,
    ):
        if inventory is None:
            raise ValueError("CravingEngine requires an inventory service")
        self.manager = manager
        self.effects = effects
        self.inventory = inventory
        self.catalog = catalog
        self._publisher = publisher if publisher is not None else EventBus()
        self._rng = rng or random.Random()
        self._config = resolve_config(config)

    def process_tick(self) -> list[CravingOutcome]:
        """Evaluate cravings once. Returns one outcome per addicted category."""
        if not self._config["auto_consume"]:
            logger.debug("Auto-consume disabled; cravings skipped")
            return []

        state = self.manager.current
        outcomes = []
        for category in self.catalog.addictions:
            addiction = state.inventory.addictions.get(category.id)
            if addiction is None or addiction.level < 1:
                continue
            outcomes.append(self._process_category(category, addiction.level))

        self.manager.save()
        return outcomes

    # ─── Per-category ────────────────────────────────────────────

    def _process_category(self, category: "AddictionCategory", level: int) -> CravingOutcome:
        state = self.manager.current
        tracker = state.cravings.get(category.id)
        if tracker is None:
            tracker = CravingTracker(next_craving_at=self._full_delay())
            state.cravings[category.id] = tracker

        tracker.messages_since_use += 1
        if tracker.messages_since_use < tracker.next_craving_at:
            logger.debug(
                f"{category.id}: {tracker.messages_since_use}/{tracker.next_craving_at}"
            )
            return CravingOutcome(category=category.id, status=WAITING)

        item = self._find_item(category)
        if item is None:
            # Count is kept; the craving re-fires next tick
            logger.debug(f"{category.id} craving with nothing to consume")
            return CravingOutcome(category=category.id, status=NO_ITEM)

        volition = self.effects.get_skill_modifiers().get(RESIST_SKILL, 0)
        chance = resist_chance(volition, level, self._config)

        if self._rng.random() < chance:
            return self._resist(category, tracker, item, chance)
        return self._succumb(category, tracker, item, chance)

    def _resist(
        self,
        category: "AddictionCategory",
        tracker: CravingTracker,
        item: "InventoryItem",
        chance: float,
    ) -> CravingOutcome:
        tracker.messages_since_use = 0
        tracker.next_craving_at = max(1, self._full_delay() - 1)

        quote = self._quote(category.resist_quotes)
        self._emit(EventType.CRAVING_RESISTED, category=category.id, quote=quote)
        logger.info(f"Resisted {category.id} craving ({chance:.0%} chance)")

        return CravingOutcome(
            category=category.id,
            status=RESISTED,
            item=item.name,
            item_type=item.type,
            chance=chance,
            quote=quote,
        )

    def _succumb(
        self,
        category: "AddictionCategory",
        tracker: CravingTracker,
        item: "InventoryItem",
        chance: float,
    ) -> CravingOutcome:
        name, item_type = item.name, item.type

        if not self.inventory.consume(item):
            logger.warning(f"Craving for {category.id}: could not consume {name}")
            return CravingOutcome(
                category=category.id,
                status=CONSUME_FAILED,
                success=False,
                item=name,
                item_type=item_type,
                chance=chance,
            )

        tracker.messages_since_use = 0
        tracker.next_craving_at = self._full_delay()

        applied = self.effects.apply(item_type, source=f"craving:{category.id}")

        quote = self._quote(category.succumb_quotes)
        self._emit(EventType.CRAVING_SUCCUMBED, category=category.id, item=name, quote=quote)
        self._emit(
            EventType.CRAVING_CONSUMED,
            category=category.id,
            item=name,
            message=category.consume_message or f"Consumed {name}",
            delay_ms=self._config["consumed_notice_delay_ms"],
        )
        logger.info(f"Succumbed to {category.id} craving: consumed {name}")

        return CravingOutcome(
            category=category.id,
            status=SUCCUMBED,
            item=name,
            item_type=item_type,
            chance=chance,
            quote=quote,
            apply_result=applied,
        )

    # ─── Helpers ─────────────────────────────────────────────────

    def _find_item(self, category: "AddictionCategory") -> "InventoryItem | None":
        for item in self.manager.current.inventory.items:
            if item.type in category.item_types and item.quantity > 0:
                return item
        return None

    def _full_delay(self) -> int:
        low = self._config["craving_delay_min"]
        high = max(low, self._config["craving_delay_max"])
        return max(1, self._rng.randint(low, high))

    def _quote(self, pool) -> str | None:
        return self._rng.choice(pool) if pool else None

    def _emit(self, event_type: EventType, **data) -> None:
        self._publisher.emit(event_type, session_id=self.manager.session_id, **data)
