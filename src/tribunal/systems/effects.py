"""
Effect lifecycle for Tribunal conditions.

Owns the active-effect list in session state: applies consumables,
stacks and refreshes, clears, expires on message ticks, and triggers
withdrawal. Manual removal never causes withdrawal; only natural expiry
does.

Flow: apply() → instance lives N ticks → tick() expires it → withdrawal
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..config import Config, resolve_config
from ..data.catalog import DEFAULT_CATALOG, EffectCatalog
from ..data.models import EffectCategory
from ..rules.modifiers import sum_modifiers
from ..state.event_bus import EventBus, EventType, Publisher
from ..state.schema import ActiveEffect

if TYPE_CHECKING:
    from ..data.models import ConsumptionRule, EffectDefinition
    from ..data.skills import Skill
    from ..state.manager import SessionManager
    from ..state.schema import Vitals

logger = logging.getLogger(__name__)

WITHDRAWAL_SOURCE = "withdrawal"
TOGGLE_SOURCE = "toggle"


@dataclass
class ApplyResult:
    """Outcome of apply(), toggle_status() or select_archetype()."""
    success: bool
    category: str = ""
    effect_id: str | None = None
    stacks: int = 0
    cleared: list[str] = field(default_factory=list)
    side_effect_id: str | None = None
    healing: bool = False
    health_restored: int = 0
    morale_restored: int = 0
    quote: str | None = None
    message: str = ""


@dataclass
class RemoveResult:
    success: bool
    effect_id: str


@dataclass
class WithdrawalResult:
    """What natural expiry of one effect led to."""
    expired_id: str
    applied_id: str | None = None
    warned: bool = False


@dataclass
class TickExpiry:
    """Result of one tick of the effect lifecycle."""
    success: bool = True
    expired: list[ActiveEffect] = field(default_factory=list)
    remaining: list[ActiveEffect] = field(default_factory=list)
    withdrawals: list[WithdrawalResult] = field(default_factory=list)

    @property
    def expired_ids(self) -> list[str]:
        return [e.id for e in self.expired]


class EffectSystem:
    """
    Manages active condition instances for one session.

    Requires a SessionManager for state access and persistence and a
    Publisher for notifications. Unknown categories and ids degrade to a
    result with success=False; nothing here raises into the host.
    """

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
    def _vitals(self) -> "Vitals":
        return self.manager.current.vitals

    # ─── Queries ─────────────────────────────────────────────────

    def active_effects(self) -> list[ActiveEffect]:
        return list(self._vitals.active_effects)

    def active_effect_ids(self) -> list[str]:
        return [e.id for e in self._vitals.active_effects]

    def get_skill_modifiers(self) -> dict["Skill", int]:
        """+stacks per boosted skill, -stacks per debuffed skill, over all instances."""
        return sum_modifiers(self._vitals.active_effects, self.catalog)

    # ─── Apply ───────────────────────────────────────────────────

    def apply(self, category: str, source: str | None = None) -> ApplyResult:
        """
        Apply the condition a consumable category maps to.

        Args:
            category: Consumable category key (cigarette, alcohol, ...)
            source: Provenance tag for a new instance (defaults to category)

        Returns:
            ApplyResult with success flag, stacks, cleared ids and side effect
        """
        rule = self.catalog.get_rule(category)
        if rule is None:
            logger.info(f"No consumption rule for category: {category}")
            return ApplyResult(success=False, category=category, message="No effect for this item")

        if rule.target_effect_id is None:
            return self._apply_healing(rule)

        definition = self.catalog.get_effect(rule.target_effect_id)
        if definition is None:
            logger.warning(f"Rule {category} targets unknown effect {rule.target_effect_id}")
            return ApplyResult(success=False, category=category, message="Status effect not found")
        if rule.duration_ticks < 1:
            logger.warning(f"Rule {category} has no duration; nothing applied")
            return ApplyResult(success=False, category=category, message="Effect has no duration")

        cleared = self._clear(rule.clears)
        applied: list["EffectDefinition"] = []

        instance = self._upsert(
            definition,
            duration=rule.duration_ticks,
            stackable=rule.stackable,
            max_stacks=rule.max_stacks,
            source=source or category,
            cleared=cleared,
        )
        applied.append(definition)

        side_effect_id = self._roll_side_effect(rule, cleared, applied)

        self.manager.save()
        self._publish_removed(cleared)
        self._publish_applied(applied)
        if rule.particle:
            self._emit(EventType.PARTICLE_CUE, cue=rule.particle)

        logger.info(f"Applied {definition.id} from {category} (stacks={instance.stacks})")
        return ApplyResult(
            success=True,
            category=category,
            effect_id=definition.id,
            stacks=instance.stacks,
            cleared=cleared,
            side_effect_id=side_effect_id,
            quote=rule.quote,
            message=f"{definition.display_name} applied",
        )

    def _apply_healing(self, rule: "ConsumptionRule") -> ApplyResult:
        """Pure-heal path: restore vitals, still honour the rule's clears."""
        vitals = self._vitals
        cleared = self._clear(rule.clears)

        before_health, before_morale = vitals.health, vitals.morale
        vitals.health = min(vitals.health + rule.heal_health, vitals.max_health)
        vitals.morale = min(vitals.morale + rule.heal_morale, vitals.max_morale)

        self.manager.save()
        self._publish_removed(cleared)

        healed = []
        if rule.heal_health:
            healed.append(f"+{rule.heal_health} Health")
        if rule.heal_morale:
            healed.append(f"+{rule.heal_morale} Morale")

        return ApplyResult(
            success=True,
            category=rule.category,
            cleared=cleared,
            healing=True,
            health_restored=vitals.health - before_health,
            morale_restored=vitals.morale - before_morale,
            quote=rule.quote,
            message=", ".join(healed) or "Consumed",
        )

    def _roll_side_effect(
        self,
        rule: "ConsumptionRule",
        cleared: list[str],
        applied: list["EffectDefinition"],
    ) -> str | None:
        # Side effects never carry a further side effect
        if not rule.side_effect_id or rule.side_effect_chance <= 0:
            return None

        roll = self._rng.random()
        if roll >= rule.side_effect_chance:
            return None

        definition = self.catalog.get_effect(rule.side_effect_id)
        if definition is None:
            logger.warning(f"Side effect {rule.side_effect_id} not in catalog")
            return None

        self._upsert(
            definition,
            duration=rule.duration_ticks,
            stackable=False,
            max_stacks=1,
            source=f"{rule.category}:side-effect",
            cleared=cleared,
        )
        applied.append(definition)
        logger.info(f"Side effect {definition.id} from {rule.category} (rolled {roll:.2f})")
        return definition.id

    def _clear(self, effect_ids) -> list[str]:
        """Remove every active instance whose id is listed. Returns removed ids."""
        if not effect_ids:
            return []
        vitals = self._vitals
        targets = set(effect_ids)
        cleared = [e.id for e in vitals.active_effects if e.id in targets]
        if cleared:
            vitals.active_effects = [e for e in vitals.active_effects if e.id not in targets]
        return cleared

    def _upsert(
        self,
        definition: "EffectDefinition",
        duration: int,
        stackable: bool,
        max_stacks: int,
        source: str,
        cleared: list[str],
    ) -> ActiveEffect:
        """Create, stack or refresh one instance. Caller saves and publishes."""
        vitals = self._vitals

        group = definition.exclusion_group
        if group:
            rivals = [
                e.id for e in vitals.active_effects
                if e.id != definition.id and self._group_of(e.id) == group
            ]
            if rivals:
                vitals.active_effects = [e for e in vitals.active_effects if e.id not in rivals]
                cleared.extend(rivals)

        existing = vitals.find_effect(definition.id)
        if existing:
            if stackable and existing.stacks < max_stacks:
                existing.stacks += 1
            existing.remaining_messages = duration
            return existing

        instance = ActiveEffect(
            id=definition.id,
            remaining_messages=duration,
            stacks=1,
            source=source,
        )
        vitals.active_effects.append(instance)
        return instance

    def _group_of(self, effect_id: str) -> str | None:
        definition = self.catalog.get_effect(effect_id)
        return definition.exclusion_group if definition else None

    # ─── Tick & Withdrawal ───────────────────────────────────────

    def tick(self) -> TickExpiry:
        """
        Advance every instance by one message tick.

        Instances reaching 0 are removed and run their withdrawal check
        exactly once. Withdrawal instances created here are not
        decremented until the next tick.
        """
        vitals = self._vitals
        expired: list[ActiveEffect] = []
        remaining: list[ActiveEffect] = []

        for instance in vitals.active_effects:
            instance.remaining_messages -= 1
            if instance.remaining_messages <= 0:
                expired.append(instance)
            else:
                remaining.append(instance)

        vitals.active_effects = remaining
        self.manager.save()

        result = TickExpiry(expired=expired, remaining=list(remaining))
        for instance in expired:
            logger.info(f"{instance.id} expired")
            self._emit(EventType.EFFECT_REMOVED, id=instance.id)
            result.withdrawals.append(self.check_withdrawal(instance.id))

        return result

    def check_withdrawal(self, expired_effect_id: str) -> WithdrawalResult:
        """
        Apply what follows the natural expiry of ``expired_effect_id``.

        Withdrawal effects refresh but never stack. Threshold rules only
        land their effect when the addiction is above the threshold;
        otherwise a warning notification is emitted instead.
        """
        result = WithdrawalResult(expired_id=expired_effect_id)
        rule = self.catalog.get_withdrawal(expired_effect_id)
        if rule is None:
            return result

        if rule.is_threshold_check:
            addiction = self.manager.current.inventory.addictions.get(rule.addiction_category or "")
            level = addiction.level if addiction else 0
            if level <= rule.severity_threshold:
                logger.info(
                    f"{expired_effect_id} wore off; {rule.addiction_category} "
                    f"level {level} below withdrawal threshold"
                )
                self._emit(
                    EventType.WITHDRAWAL_WARNING,
                    effect_id=expired_effect_id,
                    category=rule.addiction_category,
                    level=level,
                )
                result.warned = True
                return result

        if not rule.withdrawal_effect_id:
            return result

        definition = self.catalog.get_effect(rule.withdrawal_effect_id)
        if definition is None:
            logger.warning(f"Withdrawal effect {rule.withdrawal_effect_id} not in catalog")
            return result

        cleared: list[str] = []
        self._upsert(
            definition,
            duration=rule.duration_ticks,
            stackable=False,
            max_stacks=1,
            source=WITHDRAWAL_SOURCE,
            cleared=cleared,
        )
        self.manager.save()
        self._publish_removed(cleared)
        self._publish_applied([definition])

        logger.info(f"Withdrawal: {expired_effect_id} → {definition.id}")
        result.applied_id = definition.id
        return result

    # ─── Manual actions ──────────────────────────────────────────

    def remove_effect(self, effect_id: str) -> RemoveResult:
        """Unconditional manual removal. Never triggers withdrawal."""
        vitals = self._vitals
        kept = [e for e in vitals.active_effects if e.id != effect_id]
        if len(kept) == len(vitals.active_effects):
            return RemoveResult(success=False, effect_id=effect_id)

        vitals.active_effects = kept
        self.manager.save()
        self._emit(EventType.EFFECT_REMOVED, id=effect_id)
        logger.info(f"Removed: {effect_id}")
        return RemoveResult(success=True, effect_id=effect_id)

    def toggle_status(self, effect_id: str, duration: int | None = None) -> ApplyResult:
        """
        Host "toggle status" action.

        Active → manual removal (no withdrawal). Inactive → a single,
        non-stacking instance lasting ``duration`` ticks (config default).
        Archetypes toggle the archetype slot instead.
        """
        definition = self.catalog.get_effect(effect_id)
        if definition is None:
            return ApplyResult(success=False, message=f"Unknown status: {effect_id}")

        if definition.category == EffectCategory.ARCHETYPE:
            selected = self._vitals.archetype == effect_id
            return self.select_archetype(None if selected else effect_id)

        if self._vitals.find_effect(effect_id):
            removed = self.remove_effect(effect_id)
            return ApplyResult(
                success=removed.success,
                effect_id=effect_id,
                message=f"{definition.display_name} removed",
            )

        ticks = duration if duration is not None else self._config["toggle_duration"]
        if ticks < 1:
            return ApplyResult(success=False, effect_id=effect_id, message="Duration must be positive")

        cleared: list[str] = []
        instance = self._upsert(
            definition,
            duration=ticks,
            stackable=False,
            max_stacks=1,
            source=TOGGLE_SOURCE,
            cleared=cleared,
        )
        self.manager.save()
        self._publish_removed(cleared)
        self._publish_applied([definition])
        return ApplyResult(
            success=True,
            effect_id=effect_id,
            stacks=instance.stacks,
            cleared=cleared,
            message=f"{definition.display_name} applied",
        )

    def select_archetype(self, effect_id: str | None) -> ApplyResult:
        """Fill (or empty, with None) the single archetype slot."""
        vitals = self._vitals
        previous = vitals.archetype

        if effect_id is not None:
            definition = self.catalog.get_effect(effect_id)
            if definition is None or definition.category != EffectCategory.ARCHETYPE:
                return ApplyResult(success=False, message=f"Not an archetype: {effect_id}")

        if previous == effect_id:
            return ApplyResult(success=True, effect_id=effect_id, message="Archetype unchanged")

        vitals.archetype = effect_id
        self.manager.save()

        if previous:
            self._emit(EventType.EFFECT_REMOVED, id=previous)
        if effect_id:
            self._publish_applied([definition])

        return ApplyResult(
            success=True,
            effect_id=effect_id,
            cleared=[previous] if previous else [],
            message=f"Archetype: {effect_id or 'none'}",
        )

    # ─── Notifications ───────────────────────────────────────────

    def _emit(self, event_type: EventType, **data) -> None:
        self._publisher.emit(event_type, session_id=self.manager.session_id, **data)

    def _publish_applied(self, definitions: list["EffectDefinition"]) -> None:
        for definition in definitions:
            self._emit(EventType.EFFECT_APPLIED, id=definition.id, definition=definition)

    def _publish_removed(self, effect_ids: list[str]) -> None:
        for effect_id in effect_ids:
            self._emit(EventType.EFFECT_REMOVED, id=effect_id)
