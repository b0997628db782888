"""Delegate-based factories for aggregates and events, keyed by type name."""

from __future__ import annotations

from typing import Any, Callable

from .aggregate import AggregateRoot
from .naming import type_name


class DelegateAggregateFactory:
    """Creates aggregates from registered constructor functions."""

    def __init__(self) -> None:
        self._delegates: dict[str, Callable[[str], AggregateRoot]] = {}

    def register_delegate(
        self, aggregate: Any, delegate: Callable[[str], AggregateRoot]
    ) -> None:
        """Register ``delegate`` to build aggregates of ``aggregate``'s type.

        Raises ValueError if a delegate is already registered for the type.
        """
        name = type_name(aggregate)
        if name in self._delegates:
            raise ValueError(f'Factory delegate already registered for type: "{name}"')
        self._delegates[name] = delegate

    def get_aggregate(self, type_name: str, aggregate_id: str) -> AggregateRoot | None:
        """Build an aggregate of the named type, or return None if unknown."""
        delegate = self._delegates.get(type_name)
        if delegate is None:
            return None
        return delegate(aggregate_id)


class DelegateEventFactory:
    """Creates empty event instances from their type name, for deserialisation."""

    def __init__(self) -> None:
        self._delegates: dict[str, Callable[[], Any]] = {}

    def register_delegate(self, event: Any, delegate: Callable[[], Any]) -> None:
        """Register ``delegate`` to build events of ``event``'s type.

        Raises ValueError if a delegate is already registered for the type.
        """
        name = type_name(event)
        if name in self._delegates:
            raise ValueError(f'Factory delegate already registered for type: "{name}"')
        self._delegates[name] = delegate

    def get_event(self, type_name: str) -> Any:
        """Build an event of the named type, or return None if unknown."""
        delegate = self._delegates.get(type_name)
        if delegate is None:
            return None
        return delegate()