"""Command handling for inventory items."""

from __future__ import annotations

from contextlib import suppress
from typing import Any, Callable, Protocol

from ..errors import AggregateNotFoundError, CommandExecutionError
from ..messages import CommandMessage
from ..naming import type_name
from .domain import (
    CheckInItemsToInventory,
    CreateInventoryItem,
    DeactivateInventoryItem,
    InventoryItem,
    RemoveItemsFromInventory,
    RenameInventoryItem,
)


class InventoryItemRepository(Protocol):
    """Persistence for inventory items."""

    def load(self, aggregate_type: str, aggregate_id: str) -> InventoryItem | None: ...

    def save(self, aggregate: Any, expected_version: int | None) -> None: ...


class InventoryCommandHandlers:
    """Carries out inventory item commands against a repository."""

    def __init__(self, repo: InventoryItemRepository) -> None:
        self._repo = repo

    def handle(self, message: CommandMessage) -> None:
        """Execute the command and save the resulting changes.

        Raises CommandExecutionError when the item rejects the command and
        TypeError for commands this handler does not know.
        """
        match message.command:
            case CreateInventoryItem(name=name):
                item = InventoryItem(message.aggregate_id)
                self._execute(message, item.create, name)
            case DeactivateInventoryItem():
                item = self._load(message.aggregate_id)
                self._execute(message, item.deactivate)
            case RemoveItemsFromInventory(count=count):
                item = self._load(message.aggregate_id)
                with suppress(ValueError):
                    item.remove(count)
            case CheckInItemsToInventory(count=count):
                item = self._load(message.aggregate_id)
                with suppress(ValueError):
                    item.check_in(count)
            case RenameInventoryItem(new_name=new_name):
                item = self._load(message.aggregate_id)
                self._execute(message, item.change_name, new_name)
            case other:
                raise TypeError(
                    "InventoryCommandHandlers has received a command that it does "
                    f"not know how to handle, {other!r}"
                )
        self._repo.save(item, item.original_version())

    def _load(self, aggregate_id: str) -> InventoryItem:
        item_type = type_name(InventoryItem)
        item = self._repo.load(item_type, aggregate_id)
        if item is None:
            raise AggregateNotFoundError(aggregate_id, item_type)
        return item

    @staticmethod
    def _execute(message: CommandMessage, action: Callable[..., None], *args: Any) -> None:
        try:
            action(*args)
        except ValueError as err:
            raise CommandExecutionError(message, str(err)) from err