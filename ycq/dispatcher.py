"""Routing of command messages to their registered command handler."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .messages import CommandMessage
from .naming import type_name


@runtime_checkable
class CommandHandler(Protocol):
    """Something that carries out commands, raising when one fails."""

    def handle(self, message: CommandMessage) -> Any: ...


class InMemoryDispatcher:
    """In-process dispatcher with one handler per command type."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def dispatch(self, command: CommandMessage) -> Any:
        """Pass ``command`` to the handler registered for its type.

        Raises LookupError when no handler is registered for the type.
        Whatever the handler raises propagates to the caller.
        """
        handler = self._handlers.get(command.command_type())
        if handler is None:
            raise LookupError(
                "The command bus does not have a handler for commands of type: "
                f"{command.command_type()}"
            )
        return handler.handle(command)

    def register_handler(self, handler: CommandHandler, *args: Any) -> None:
        """Register ``handler`` for each command type given in ``args``.

        Commands may be given as instances or classes. Raises ValueError on
        the first type that already has a handler; types before it stay
        registered.
        """
        for command in args:
            name = type_name(command)
            if name in self._handlers:
                raise ValueError(
                    "Duplicate command handler registration with command bus "
                    f"for command of type: {name}"
                )
            self._handlers[name] = handler