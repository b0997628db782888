"""In-process publication of event messages to event handlers."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .messages import EventMessage
from .naming import type_name


@runtime_checkable
class EventHandler(Protocol):
    """Something that reacts to published events."""

    def handle(self, message: EventMessage) -> Any: ...


class InternalEventBus:
    """Lightweight event bus; any number of handlers may subscribe to a type."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def publish_event(self, event: EventMessage) -> None:
        """Deliver ``event`` to every handler registered for its type."""
        for handler in list(self._handlers.get(event.event_type(), ())):
            handler.handle(event)

    def add_handler(self, handler: EventHandler, *args: Any) -> None:
        """Subscribe ``handler`` to each event type given in ``args``.

        Events may be given as instances or classes. A handler is held at
        most once per event type.
        """
        for event in args:
            handlers = self._handlers.setdefault(type_name(event), [])
            if not any(existing is handler for existing in handlers):
                handlers.append(handler)