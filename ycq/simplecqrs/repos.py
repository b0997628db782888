"""Repositories for inventory items: in memory and event-store backed."""

from __future__ import annotations

from typing import Any

from ..aggregate import AggregateRoot
from ..errors import AggregateNotFoundError
from ..eventbus import InternalEventBus
from ..factories import DelegateAggregateFactory, DelegateEventFactory
from ..messages import EventMessage
from ..naming import type_name
from ..repository import CommonDomainRepository, EventStore
from ..streamnamer import DelegateStreamNamer
from .domain import (
    InventoryItem,
    InventoryItemCreated,
    InventoryItemDeactivated,
    InventoryItemRenamed,
    ItemsCheckedIntoInventory,
    ItemsRemovedFromInventory,
)


class InMemoryRepo:
    """Keeps inventory item events in memory and publishes them on save."""

    def __init__(self, event_bus: InternalEventBus) -> None:
        self._current: dict[str, list[EventMessage]] = {}
        self._publisher = event_bus

    def load(self, aggregate_type: str, aggregate_id: str) -> InventoryItem:
        """Rebuild an inventory item; raise AggregateNotFoundError if unknown."""
        try:
            events = self._current[aggregate_id]
        except KeyError:
            raise AggregateNotFoundError(aggregate_id, aggregate_type) from None
        item = InventoryItem(aggregate_id)
        for message in events:
            item.apply(message, False)
            item.increment_version()
        return item

    def save(self, aggregate: AggregateRoot, expected_version: int | None) -> None:
        """Store and publish the aggregate's changes; the version is not checked."""
        stream = self._current.setdefault(aggregate.aggregate_id, [])
        for message in aggregate.get_changes():
            stream.append(message)
            self._publisher.publish_event(message)


class InventoryItemRepo:
    """Event-store repository configured for inventory items.

    Streams are named ``<aggregate type>-<aggregate id>``.
    """

    def __init__(self, event_store: EventStore, event_bus: InternalEventBus) -> None:
        self._repo = CommonDomainRepository(event_store, event_bus)

        aggregates = DelegateAggregateFactory()
        aggregates.register_delegate(InventoryItem, InventoryItem)
        self._repo.aggregate_factory = aggregates

        namer = DelegateStreamNamer()
        namer.register_delegate(lambda kind, aggregate_id: kind + "-" + aggregate_id, InventoryItem)
        self._repo.stream_name_delegate = namer

        events = DelegateEventFactory()
        for event_class in (
            InventoryItemCreated,
            InventoryItemRenamed,
            InventoryItemDeactivated,
            ItemsRemovedFromInventory,
            ItemsCheckedIntoInventory,
        ):
            events.register_delegate(event_class, event_class)
        self._repo.event_factory = events

    def load(self, aggregate_type: str, aggregate_id: str) -> InventoryItem | None:
        """Load an inventory item, or return None if it does not exist."""
        item_type = type_name(InventoryItem)
        try:
            aggregate: Any = self._repo.load(item_type, aggregate_id)
        except AggregateNotFoundError:
            return None
        if isinstance(aggregate, InventoryItem):
            return aggregate
        raise TypeError(f"Could not cast aggregate returned to type of {item_type}")

    def save(self, aggregate: AggregateRoot, expected_version: int | None) -> None:
        """Persist the aggregate's changes."""
        self._repo.save(aggregate, expected_version)