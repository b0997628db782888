"""Per-aggregate-type delegates that build event stream names."""

from __future__ import annotations

from typing import Any, Callable

from .naming import type_name


class DelegateStreamNamer:
    """Builds stream names with a delegate registered per aggregate type."""

    def __init__(self) -> None:
        self._delegates: dict[str, Callable[[str, str], str]] = {}

    def register_delegate(self, delegate: Callable[[str, str], str], *args: Any) -> None:
        """Register ``delegate`` for each aggregate type given in ``args``.

        Aggregates may be given as instances or classes. The delegate is
        called with the aggregate type name and the aggregate id. Raises
        ValueError on the first type that already has a delegate.
        """
        for aggregate in args:
            name = type_name(aggregate)
            if name in self._delegates:
                raise ValueError(
                    f'The stream name delegate for "{name}" is already registered '
                    "with the stream namer."
                )
            self._delegates[name] = delegate

    def get_stream_name(self, aggregate_type_name: str, aggregate_id: str) -> str:
        """Return the stream name for the aggregate.

        Raises LookupError if no delegate is registered for the type.
        """
        delegate = self._delegates.get(aggregate_type_name)
        if delegate is None:
            raise LookupError(
                "There is no stream name delegate for aggregate of type "
                f'"{aggregate_type_name}"'
            )
        return delegate(aggregate_type_name, aggregate_id)