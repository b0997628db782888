"""Aggregate root protocol and a reusable base implementation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .messages import EventMessage


@runtime_checkable
class AggregateRoot(Protocol):
    """What every aggregate offers to repositories and command handlers."""

    aggregate_id: str

    def original_version(self) -> int: ...

    def current_version(self) -> int: ...

    def increment_version(self) -> None: ...

    def apply(self, message: EventMessage, is_new: bool) -> None: ...

    def track_change(self, event: EventMessage) -> None: ...

    def get_changes(self) -> list[EventMessage]: ...

    def clear_changes(self) -> None: ...


class AggregateBase:
    """Version and change tracking shared by aggregates.

    Subclasses supply ``apply``. An aggregate with one persisted event is at
    version 0, matching the numbering of events in an event store stream.
    """

    def __init__(self, aggregate_id: str) -> None:
        self.aggregate_id = aggregate_id
        self._version = -1
        self._changes: list[EventMessage] = []

    def original_version(self) -> int:
        """Version as loaded from the repository, before new changes."""
        return self._version

    def current_version(self) -> int:
        """Version including unpersisted changes."""
        return self._version + len(self._changes)

    def increment_version(self) -> None:
        """Advance the persisted version by one."""
        self._version += 1

    def track_change(self, event: EventMessage) -> None:
        """Record a new, unpersisted event."""
        self._changes.append(event)

    def get_changes(self) -> list[EventMessage]:
        """Return the unpersisted events in the order they were applied."""
        return list(self._changes)

    def clear_changes(self) -> None:
        """Forget all unpersisted events."""
        self._changes = []