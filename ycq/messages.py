"""Envelopes that carry events and commands with their metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .naming import type_name


@dataclass
class EventMessage:
    """An event payload addressed to an aggregate, with headers and version."""

    aggregate_id: str
    event: Any
    version: int | None = None
    headers: dict[str, Any] = field(default_factory=dict)

    def event_type(self) -> str:
        """Return the name of the event payload's type."""
        return type_name(self.event)

    def set_header(self, key: str, value: Any) -> None:
        """Set the header ``key`` to ``value``."""
        self.headers[key] = value


@dataclass
class CommandMessage:
    """A command payload addressed to an aggregate, with headers."""

    aggregate_id: str
    command: Any
    headers: dict[str, Any] = field(default_factory=dict)

    def command_type(self) -> str:
        """Return the name of the command payload's type."""
        return type_name(self.command)

    def set_header(self, key: str, value: Any) -> None:
        """Set the header ``key`` to ``value``."""
        self.headers[key] = value