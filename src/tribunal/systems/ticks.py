"""
Tick orchestration for one session.

Host-facing facade that owns the condition services and enforces the
per-tick order: effect expiry and withdrawal, then cravings, then
addiction decay, then the ancient voice recompute.

Usage:
    from tribunal.systems import TickOrchestrator
    from tribunal.state import EventBus, JsonSessionStore

    bus = EventBus()
    conditions = TickOrchestrator(JsonSessionStore("sessions"), "harry", publisher=bus)
    conditions.consume_item("Astra Cigarettes")
    result = conditions.message_tick()
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from ..config import Config, load_config, resolve_config
from ..data.catalog import DEFAULT_CATALOG, EffectCatalog
from ..state.event_bus import EventBus, Publisher
from ..state.manager import SessionManager
from ..state.store import JsonSessionStore, SessionStore
from .addiction import AddictionChange, AddictionTracker
from .cravings import SUCCUMBED, CravingEngine, CravingOutcome
from .effects import ApplyResult, EffectSystem, RemoveResult, TickExpiry
from .inventory import InventoryService, SessionInventory
from .modifiers import SkillModifierAggregator
from .voices import AncientVoiceMonitor

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Everything one message tick did."""
    success: bool
    message_count: int
    expiry: TickExpiry
    cravings: list[CravingOutcome] = field(default_factory=list)
    addiction_changes: list[AddictionChange] = field(default_factory=list)
    awakened: list[str] = field(default_factory=list)
    silenced: list[str] = field(default_factory=list)
    saved: bool = True


@dataclass
class ConsumeResult:
    """Outcome of the host "consume item" action."""
    success: bool
    item: str
    message: str = ""
    apply_result: ApplyResult | None = None
    addiction: AddictionChange | None = None


class TickOrchestrator:
    """
    Condition core for one session.

    Inventory defaults to the items in session state and the publisher to
    a private EventBus; pass your own to wire the host in. Without an
    explicit config, a JSON store reads .tribunal_config.json from its
    sessions directory.
    """

    def __init__(
        self,
        store: SessionStore | None,
        session_id: str,
        inventory: InventoryService | None = None,
        publisher: Publisher | None = None,
        rng: random.Random | None = None,
        config: Config | None = None,
        catalog: EffectCatalog = DEFAULT_CATALOG,
    ):
        if config is None and isinstance(store, JsonSessionStore):
            config = load_config(store.sessions_dir)
        self.config = resolve_config(config)
        self.catalog = catalog
        self.publisher = publisher if publisher is not None else EventBus()
        self._rng = rng or random.Random()

        self.manager = SessionManager(store, session_id)
        self.inventory = inventory if inventory is not None else SessionInventory(self.manager)

        self.effects = EffectSystem(
            self.manager, self.publisher, self._rng, catalog, self.config,
        )
        self.cravings = CravingEngine(
            self.manager, self.effects, self.inventory, self.publisher,
            self._rng, catalog, self.config,
        )
        self.addictions = AddictionTracker(
            self.manager, self.publisher, self._rng, catalog, self.config,
        )
        self.voices = AncientVoiceMonitor(self.publisher, catalog, session_id)
        self.modifiers = SkillModifierAggregator(self.manager, catalog)

        self.voices.sync(self.effects.active_effect_ids())

    @property
    def session_id(self) -> str:
        return self.manager.session_id

    @property
    def deep_effects(self) -> frozenset[str]:
        return self.voices.active

    # ─── Tick ────────────────────────────────────────────────────

    def message_tick(self) -> TickResult:
        """Run one message tick in the fixed order and save once at the end."""
        state = self.manager.current
        state.message_count += 1

        expiry = self.effects.tick()
        cravings = self.cravings.process_tick()
        for outcome in cravings:
            if outcome.status == SUCCUMBED and outcome.item_type:
                self.addictions.record_use(outcome.item_type)
        changes = self.addictions.decay()
        awakened, silenced = self.voices.update(self.effects.active_effect_ids())

        state.touch()
        saved = self.manager.save()

        logger.debug(
            f"Tick {state.message_count}: expired={expiry.expired_ids} "
            f"cravings={[o.status for o in cravings]}"
        )
        return TickResult(
            success=True,
            message_count=state.message_count,
            expiry=expiry,
            cravings=cravings,
            addiction_changes=changes,
            awakened=awakened,
            silenced=silenced,
            saved=saved,
        )

    # ─── User actions ────────────────────────────────────────────

    def consume_item(self, name: str) -> ConsumeResult:
        """Consume one of a held item by name and apply what it does."""
        item = self.manager.current.inventory.find_item(name)
        if item is None:
            return ConsumeResult(success=False, item=name, message=f"Not carrying {name}")

        item_name, item_type = item.name, item.type
        if not self.inventory.consume(item):
            return ConsumeResult(success=False, item=item_name, message=f"Could not consume {item_name}")

        applied = self.effects.apply(item_type)
        addiction = self.addictions.record_use(item_type)
        self._refresh_voices()

        return ConsumeResult(
            success=True,
            item=item_name,
            message=applied.message if applied.success else f"Consumed {item_name}",
            apply_result=applied,
            addiction=addiction if addiction.success else None,
        )

    def apply(self, category: str) -> ApplyResult:
        result = self.effects.apply(category)
        self._refresh_voices()
        return result

    def remove_effect(self, effect_id: str) -> RemoveResult:
        result = self.effects.remove_effect(effect_id)
        self._refresh_voices()
        return result

    def toggle_status(self, effect_id: str, duration: int | None = None) -> ApplyResult:
        result = self.effects.toggle_status(effect_id, duration)
        self._refresh_voices()
        return result

    def select_archetype(self, effect_id: str | None) -> ApplyResult:
        return self.effects.select_archetype(effect_id)

    def _refresh_voices(self) -> None:
        self.voices.update(self.effects.active_effect_ids())
