"""Event-sourced domain repository backed by an event store."""

from __future__ import annotations

import copy
import dataclasses
from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol, runtime_checkable

from .aggregate import AggregateRoot
from .errors import (
    AggregateNotFoundError,
    ConcurrencyViolationError,
    RepositoryUnavailableError,
    UnauthorizedError,
    UnexpectedError,
)
from .eventbus import InternalEventBus
from .factories import DelegateAggregateFactory, DelegateEventFactory
from .messages import EventMessage
from .naming import type_name
from .streamnamer import DelegateStreamNamer


@dataclass
class RecordedEvent:
    """An event as held in a stream: type name, field data and metadata.

    ``event_number`` is the zero-based position in the stream, assigned by
    the store when the event is appended.
    """

    event_type: str
    data: dict[str, Any]
    metadata: dict[str, Any] = field(default_factory=dict)
    event_number: int = -1


class StoreError(Exception):
    """Base class for failures reported by an event store."""


class StoreUnavailableError(StoreError):
    """The event store is temporarily unavailable."""


class StoreUnauthorizedError(StoreError):
    """The event store refused the request."""


class StoreNotFoundError(StoreError):
    """The requested stream does not exist."""


class StoreConcurrencyError(StoreError):
    """The stream is not at the expected version."""


@runtime_checkable
class EventStore(Protocol):
    """Persistence of event streams."""

    def read_stream(self, stream_name: str) -> Iterable[RecordedEvent]: ...

    def append(
        self,
        stream_name: str,
        expected_version: int | None,
        events: list[RecordedEvent],
    ) -> None: ...


class InMemoryEventStore:
    """Event store keeping streams in process memory."""

    def __init__(self) -> None:
        self._streams: dict[str, list[RecordedEvent]] = {}

    def read_stream(self, stream_name: str) -> list[RecordedEvent]:
        """Return copies of the events in the stream, oldest first.

        Raises StoreNotFoundError if the stream does not exist.
        """
        try:
            stream = self._streams[stream_name]
        except KeyError:
            raise StoreNotFoundError(f"stream not found: {stream_name}") from None
        return [copy.deepcopy(record) for record in stream]

    def append(
        self,
        stream_name: str,
        expected_version: int | None,
        events: list[RecordedEvent],
    ) -> None:
        """Append events to the stream, numbering them in order.

        ``expected_version`` is the number of the last event in the stream,
        -1 for a stream that does not exist, or None to accept any version.
        Raises StoreConcurrencyError when the stream is at another version.
        """
        stream = self._streams.get(stream_name, [])
        current = len(stream) - 1
        if expected_version is not None and expected_version != current:
            raise StoreConcurrencyError(
                f"stream {stream_name} is at version {current}, "
                f"expected {expected_version}"
            )
        if not events:
            return
        start = len(stream)
        recorded = [
            RecordedEvent(
                event_type=event.event_type,
                data=copy.deepcopy(event.data),
                metadata=dict(event.metadata),
                event_number=start + offset,
            )
            for offset, event in enumerate(events)
        ]
        self._streams[stream_name] = stream + recorded


def _event_data(event: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(event) and not isinstance(event, type):
        return dataclasses.asdict(event)
    if hasattr(event, "__dict__"):
        return copy.deepcopy(vars(event))
    raise TypeError(f"cannot serialise event of type {type_name(event)}")


def _populate(event: Any, record: RecordedEvent) -> Any:
    if event is None:
        raise LookupError(f"no event type registered for {record.event_type}")
    for key, value in record.data.items():
        setattr(event, key, copy.deepcopy(value))
    return event


class CommonDomainRepository:
    """Loads and saves aggregates as event streams in an event store.

    The aggregate factory, event factory and stream name delegate are
    configured through the attributes of the same names.
    """

    def __init__(self, event_store: EventStore | None, event_bus: InternalEventBus | None) -> None:
        if event_store is None:
            raise ValueError("No event store injected into repository.")
        if event_bus is None:
            raise ValueError("No event bus injected into repository.")
        self.event_store = event_store
        self.event_bus = event_bus
        self.aggregate_factory: DelegateAggregateFactory | None = None
        self.event_factory: DelegateEventFactory | None = None
        self.stream_name_delegate: DelegateStreamNamer | None = None

    def load(self, aggregate_type: str, aggregate_id: str) -> AggregateRoot:
        """Rebuild an aggregate of the named type from its event stream."""
        if self.aggregate_factory is None:
            raise RuntimeError("The common domain repository has no Aggregate Factory.")
        if self.stream_name_delegate is None:
            raise RuntimeError("The common domain repository has no stream name delegate.")
        if self.event_factory is None:
            raise RuntimeError("The common domain has no Event Factory.")

        aggregate = self.aggregate_factory.get_aggregate(aggregate_type, aggregate_id)
        if aggregate is None:
            raise LookupError(
                "The repository has no aggregate factory registered for aggregate type: "
                f"{aggregate_type}"
            )

        stream_name = self.stream_name_delegate.get_stream_name(aggregate_type, aggregate_id)

        try:
            records = list(self.event_store.read_stream(stream_name))
        except (StoreUnavailableError, ConnectionError) as err:
            raise RepositoryUnavailableError() from err
        except StoreUnauthorizedError as err:
            raise UnauthorizedError() from err
        except StoreNotFoundError as err:
            raise AggregateNotFoundError(aggregate_id, aggregate_type) from err
        except Exception as err:
            raise UnexpectedError(err) from err

        for record in records:
            event = _populate(self.event_factory.get_event(record.event_type), record)
            message = EventMessage(aggregate_id, event, record.event_number)
            for key, value in record.metadata.items():
                message.set_header(key, value)
            aggregate.apply(message, False)
            aggregate.increment_version()

        return aggregate

    def save(self, aggregate: AggregateRoot, expected_version: int | None) -> None:
        """Append the aggregate's changes to its stream and publish them.

        With an expected version, published messages carry the version each
        event takes in the stream; without one, the tracked messages are
        published as they are.
        """
        if self.stream_name_delegate is None:
            raise RuntimeError("The common domain repository has no stream name delegate.")

        changes = aggregate.get_changes()
        stream_name = self.stream_name_delegate.get_stream_name(
            type_name(aggregate), aggregate.aggregate_id
        )

        if changes:
            try:
                records = []
                for message in changes:
                    message.set_header("AggregateID", aggregate.aggregate_id)
                    records.append(
                        RecordedEvent(
                            event_type=message.event_type(),
                            data=_event_data(message.event),
                            metadata=dict(message.headers),
                        )
                    )
                self.event_store.append(stream_name, expected_version, records)
            except StoreConcurrencyError as err:
                raise ConcurrencyViolationError(aggregate, expected_version, stream_name) from err
            except StoreUnauthorizedError as err:
                raise UnauthorizedError() from err
            except StoreUnavailableError as err:
                raise RepositoryUnavailableError() from err
            except Exception as err:
                raise UnexpectedError(err) from err

        aggregate.clear_changes()

        for offset, message in enumerate(changes):
            if expected_version is None:
                self.event_bus.publish_event(message)
            else:
                self.event_bus.publish_event(
                    EventMessage(
                        message.aggregate_id,
                        message.event,
                        expected_version + offset + 1,
                    )
                )