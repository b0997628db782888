# ycq

`ycq` is a small library of building blocks for applications that follow the
CQRS (Command Query Responsibility Segregation) and event-sourcing style.

## What it provides

- **Messages** (`ycq.messages`): `EventMessage` and `CommandMessage` are
  dataclasses that wrap a payload together with the aggregate id and a
  dictionary of headers. `EventMessage` also carries an optional `version`.
  `event_type()` / `command_type()` return the name of the payload's class.
- **Aggregates** (`ycq.aggregate`): `AggregateBase` tracks an aggregate's id,
  version and unpersisted changes (`original_version`, `current_version`,
  `increment_version`, `track_change`, `get_changes`, `clear_changes`).
  Subclass it and implement `apply(message, is_new)`. A fresh aggregate is at
  version -1; one persisted event brings it to version 0. `AggregateRoot` is
  the protocol repositories work against.
- **Command dispatching** (`ycq.dispatcher`): `InMemoryDispatcher` routes each
  command to the one handler registered for its type.
- **Event publishing** (`ycq.eventbus`): `InternalEventBus` delivers each event
  to every handler registered for its type.
- **Factories and stream naming** (`ycq.factories`, `ycq.streamnamer`):
  `DelegateAggregateFactory`, `DelegateEventFactory` and `DelegateStreamNamer`
  map type names to the callables that build aggregates, build empty events
  and name event streams.
- **Persistence** (`ycq.repository`): `CommonDomainRepository` loads an
  aggregate by replaying its event stream and saves new changes to an event
  store, then publishes them on the event bus. Any object with `read_stream`
  and `append` methods satisfies the `EventStore` protocol;
  `InMemoryEventStore` is a ready-made store that keeps streams in process
  memory. Stores report failures with `StoreUnavailableError`,
  `StoreUnauthorizedError`, `StoreNotFoundError` and `StoreConcurrencyError`,
  which the repository turns into the package's own errors.
- **Errors** (`ycq.errors`): a `CqrsError` hierarchy (`AggregateNotFoundError`,
  `ConcurrencyViolationError`, `UnauthorizedError`,
  `RepositoryUnavailableError`, `UnexpectedError`, `CommandExecutionError`).
- **Helpers** (`ycq.naming`): `type_name(obj)` gives the registration key for a
  class or instance, and `new_uuid()` returns a random UUID string.

The `ycq.simplecqrs` sub-package is an inventory example built on top of the
library:

- `ycq.simplecqrs.domain`: the commands, events and the `InventoryItem`
  aggregate.
- `ycq.simplecqrs.handlers`: `InventoryCommandHandlers`, which carries out
  inventory commands against a repository.
- `ycq.simplecqrs.repos`: `InMemoryRepo`, and `InventoryItemRepo`, a
  `CommonDomainRepository` set up for inventory items with streams named
  `<aggregate type>-<aggregate id>`.
- `ycq.simplecqrs.readmodel`: `ReadModelDatabase`, the projections
  `InventoryListView` and `InventoryItemDetailView`, and the `ReadModel` query
  side.

## Installation

```
pip install ycq
```

There are no runtime dependencies. Python 3.10 or later is required.

## Example

```python
from ycq.dispatcher import InMemoryDispatcher
from ycq.eventbus import InternalEventBus
from ycq.messages import CommandMessage
from ycq.naming import new_uuid
from ycq.simplecqrs.domain import (
    CreateInventoryItem,
    CheckInItemsToInventory,
    InventoryItemCreated,
    ItemsCheckedIntoInventory,
)
from ycq.simplecqrs.handlers import InventoryCommandHandlers
from ycq.simplecqrs.readmodel import (
    InventoryItemDetailView,
    InventoryListView,
    ReadModel,
    ReadModelDatabase,
)
from ycq.simplecqrs.repos import InMemoryRepo

database = ReadModelDatabase()
bus = InternalEventBus()
bus.add_handler(InventoryListView(database), InventoryItemCreated)
bus.add_handler(
    InventoryItemDetailView(database),
    InventoryItemCreated,
    ItemsCheckedIntoInventory,
)

dispatcher = InMemoryDispatcher()
dispatcher.register_handler(
    InventoryCommandHandlers(InMemoryRepo(bus)),
    CreateInventoryItem,
    CheckInItemsToInventory,
)

item_id = new_uuid()
dispatcher.dispatch(CommandMessage(item_id, CreateInventoryItem(name="Widget")))
dispatcher.dispatch(CommandMessage(item_id, CheckInItemsToInventory(count=5)))

read_model = ReadModel(database)
print(read_model.get_inventory_items())
print(read_model.get_inventory_item_details(item_id))
```

Handlers, factories and stream namers are registered by type; a type name is
the name of the class, so passing either a class or an instance of it works.
Registering the same type twice raises `ValueError`, and dispatching a command
that has no handler raises `LookupError`. `CommonDomainRepository.load` raises
`RuntimeError` while its `aggregate_factory`, `stream_name_delegate` or
`event_factory` attribute is unset.

## What it does not do

- There is no client for a networked event store. `InMemoryEventStore` is the
  only store included; to persist elsewhere, write a class with `read_stream`
  and `append` that raises the `Store*Error` exceptions.
- There is no command-line program, web server or user interface. The
  inventory example is a set of classes to drive from your own code, as in the
  example above.
- Read models live only in memory, in a `ReadModelDatabase`.

## Running the tests

```
pip install -e ".[test]"
pytest
```