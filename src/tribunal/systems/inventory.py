"""
Inventory collaborator for cravings and consumption.

The condition core never edits item lists directly. Whatever owns the
inventory implements ``InventoryService``; ``SessionInventory`` is the
default, backed by the items persisted in session state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..state.manager import SessionManager
    from ..state.schema import InventoryItem

logger = logging.getLogger(__name__)


@runtime_checkable
class InventoryService(Protocol):
    """Removes one unit of an item. Returns False if nothing was consumed."""

    def consume(self, item: "InventoryItem") -> bool:
        ...


class SessionInventory:
    """InventoryService over ``manager.current.inventory``."""

    def __init__(self, manager: "SessionManager"):
        self.manager = manager

    def consume(self, item: "InventoryItem") -> bool:
        inventory = self.manager.current.inventory
        held = next((i for i in inventory.items if i.id == item.id), None)
        if held is None or held.quantity <= 0:
            logger.info(f"Cannot consume {item.name}: not held")
            return False

        held.quantity -= 1
        if held.quantity <= 0:
            inventory.items = [i for i in inventory.items if i.id != held.id]
        self.manager.save()
        return True
