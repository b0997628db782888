"""Commands, events and the inventory item aggregate of the sample domain."""

from __future__ import annotations

from dataclasses import dataclass

from ..aggregate import AggregateBase
from ..messages import EventMessage


@dataclass(frozen=True)
class CreateInventoryItem:
    """Create a new inventory item."""

    name: str = ""


@dataclass(frozen=True)
class DeactivateInventoryItem:
    """Deactivate an inventory item."""

    original_version: int = 0


@dataclass(frozen=True)
class RenameInventoryItem:
    """Rename an inventory item."""

    original_version: int = 0
    new_name: str = ""


@dataclass(frozen=True)
class CheckInItemsToInventory:
    """Add items to inventory."""

    original_version: int = 0
    count: int = 0


@dataclass(frozen=True)
class RemoveItemsFromInventory:
    """Remove items from inventory."""

    original_version: int = 0
    count: int = 0


@dataclass
class InventoryItemCreated:
    """An inventory item was created."""

    id: str = ""
    name: str = ""


@dataclass
class InventoryItemRenamed:
    """An inventory item was renamed."""

    id: str = ""
    new_name: str = ""


@dataclass
class InventoryItemDeactivated:
    """An inventory item was deactivated."""

    id: str = ""


@dataclass
class ItemsRemovedFromInventory:
    """Items were removed from inventory."""

    id: str = ""
    count: int = 0


@dataclass
class ItemsCheckedIntoInventory:
    """Items were checked into inventory."""

    id: str = ""
    count: int = 0


class InventoryItem(AggregateBase):
    """Aggregate for an inventory item.

    Behaviour methods validate their input, raising ValueError, and raise
    new events through ``apply``.
    """

    def __init__(self, aggregate_id: str) -> None:
        super().__init__(aggregate_id)
        self.activated = False
        self.count = 0

    def _raise_event(self, event: object) -> None:
        message = EventMessage(self.aggregate_id, event, self.current_version())
        self.apply(message, True)

    def create(self, name: str) -> None:
        """Raise InventoryItemCreated."""
        if not name:
            raise ValueError("the name can not be empty")
        self._raise_event(InventoryItemCreated(id=self.aggregate_id, name=name))

    def change_name(self, new_name: str) -> None:
        """Raise InventoryItemRenamed."""
        if not new_name:
            raise ValueError("the name can not be empty")
        self._raise_event(InventoryItemRenamed(id=self.aggregate_id, new_name=new_name))

    def remove(self, count: int) -> None:
        """Raise ItemsRemovedFromInventory."""
        if count <= 0:
            raise ValueError("can't remove negative count from inventory")
        if self.count - count < 0:
            raise ValueError(
                "can't remove more items from inventory than the number of items in inventory"
            )
        self._raise_event(ItemsRemovedFromInventory(id=self.aggregate_id, count=count))

    def check_in(self, count: int) -> None:
        """Raise ItemsCheckedIntoInventory."""
        if count <= 0:
            raise ValueError("must have a count greater than 0 to add to inventory")
        self._raise_event(ItemsCheckedIntoInventory(id=self.aggregate_id, count=count))

    def deactivate(self) -> None:
        """Raise InventoryItemDeactivated."""
        if not self.activated:
            raise ValueError("already deactivated")
        self._raise_event(InventoryItemDeactivated(id=self.aggregate_id))

    def apply(self, message: EventMessage, is_new: bool) -> None:
        """Update state from an event, tracking it as a change when new."""
        if is_new:
            self.track_change(message)

        match message.event:
            case InventoryItemCreated():
                self.activated = True
            case InventoryItemDeactivated():
                self.activated = False
            case ItemsRemovedFromInventory(count=count):
                self.count -= count
            case ItemsCheckedIntoInventory(count=count):
                self.count += count