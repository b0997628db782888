"""In-memory read model and the projections that build it."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..messages import EventMessage
from .domain import (
    InventoryItemCreated,
    InventoryItemDeactivated,
    InventoryItemRenamed,
    ItemsCheckedIntoInventory,
    ItemsRemovedFromInventory,
)


@dataclass
class InventoryItemDetailsDto:
    """Details of an inventory item."""

    id: str
    name: str
    current_count: int = 0
    version: int = 0


@dataclass
class InventoryItemListDto:
    """Lightweight summary of an inventory item."""

    id: str
    name: str


@dataclass
class ReadModelDatabase:
    """Storage shared by the read model and its projections."""

    details: dict[str, InventoryItemDetailsDto] = field(default_factory=dict)
    items: list[InventoryItemListDto] = field(default_factory=list)


class ReadModel:
    """Query side over a read model database."""

    def __init__(self, database: ReadModelDatabase) -> None:
        self._db = database

    def get_inventory_items(self) -> list[InventoryItemListDto]:
        """Return the summaries of all active inventory items."""
        return list(self._db.items)

    def get_inventory_item_details(self, item_id: str) -> InventoryItemDetailsDto | None:
        """Return the details of an item, or None if unknown."""
        return self._db.details.get(item_id)


class InventoryListView:
    """Projection maintaining the list of inventory item summaries."""

    def __init__(self, database: ReadModelDatabase) -> None:
        self._db = database

    def _find(self, item_id: str) -> InventoryItemListDto | None:
        return next((dto for dto in self._db.items if dto.id == item_id), None)

    def handle(self, message: EventMessage) -> None:
        """Update the list from an inventory event."""
        match message.event:
            case InventoryItemCreated(name=name):
                self._db.items.append(InventoryItemListDto(message.aggregate_id, name))
            case InventoryItemRenamed(new_name=new_name):
                dto = self._find(message.aggregate_id)
                if dto is not None:
                    dto.name = new_name
            case InventoryItemDeactivated():
                dto = self._find(message.aggregate_id)
                if dto is not None:
                    self._db.items.remove(dto)


class InventoryItemDetailView:
    """Projection maintaining inventory item details."""

    def __init__(self, database: ReadModelDatabase) -> None:
        self._db = database

    def handle(self, message: EventMessage) -> None:
        """Update item details from an inventory event.

        Raises LookupError when an event refers to an item never created.
        """
        match message.event:
            case InventoryItemCreated(name=name):
                self._db.details[message.aggregate_id] = InventoryItemDetailsDto(
                    id=message.aggregate_id, name=name, version=0
                )
            case InventoryItemRenamed(new_name=new_name):
                details = self.get_details_item(message.aggregate_id)
                details.name = new_name
                details.version = message.version
            case ItemsRemovedFromInventory(count=count):
                self.get_details_item(message.aggregate_id).current_count -= count
            case ItemsCheckedIntoInventory(count=count):
                self.get_details_item(message.aggregate_id).current_count += count
            case InventoryItemDeactivated():
                self._db.details.pop(message.aggregate_id, None)

    def get_details_item(self, item_id: str) -> InventoryItemDetailsDto:
        """Return the details of an item; raise LookupError if unknown."""
        try:
            return self._db.details[item_id]
        except KeyError:
            raise LookupError(
                "did not find the original inventory this shouldn't not happen"
            ) from None