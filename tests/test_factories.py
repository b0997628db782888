from dataclasses import dataclass

import pytest

from ycq.aggregate import AggregateBase
from ycq.factories import DelegateAggregateFactory, DelegateEventFactory
from ycq.naming import new_uuid


class SomeAggregate(AggregateBase):
    def __init__(self, aggregate_id):
        super().__init__(aggregate_id)
        self.events = []

    def apply(self, message, is_new):
        self.events.append(message)


class SomeOtherAggregate(SomeAggregate):
    pass


@dataclass
class SomeEvent:
    item: str = ""
    count: int = 0


@pytest.fixture
def aggregate_factory():
    return DelegateAggregateFactory()


@pytest.fixture
def event_factory():
    return DelegateEventFactory()


def test_can_register_aggregate_factory_delegate(aggregate_factory):
    aggregate_factory.register_delegate(SomeAggregate, SomeAggregate)
    aggregate_id = new_uuid()

    got = aggregate_factory.get_aggregate("SomeAggregate", aggregate_id)

    assert type(got) is SomeAggregate
    assert got.aggregate_id == aggregate_id
    assert got.original_version() == -1
    assert got.current_version() == -1
    assert got.events == []


def test_register_aggregate_delegate_by_instance(aggregate_factory):
    aggregate_factory.register_delegate(SomeAggregate(""), lambda i: SomeAggregate(i))

    got = aggregate_factory.get_aggregate("SomeAggregate", "abc")

    assert got.aggregate_id == "abc"


def test_duplicate_aggregate_factory_registration_raises(aggregate_factory):
    aggregate_factory.register_delegate(SomeAggregate, SomeAggregate)

    with pytest.raises(ValueError) as info:
        aggregate_factory.register_delegate(SomeAggregate(new_uuid()), SomeAggregate)

    assert str(info.value) == 'Factory delegate already registered for type: "SomeAggregate"'


def test_unknown_aggregate_type_returns_none(aggregate_factory):
    aggregate_factory.register_delegate(SomeOtherAggregate, SomeOtherAggregate)

    assert aggregate_factory.get_aggregate("SomeAggregate", new_uuid()) is None


def test_can_register_event_factory_delegate(event_factory):
    event_factory.register_delegate(SomeEvent(), SomeEvent)

    assert event_factory.get_event("SomeEvent") == SomeEvent()


def test_event_factory_returns_fresh_instances(event_factory):
    event_factory.register_delegate(SomeEvent, SomeEvent)

    first = event_factory.get_event("SomeEvent")
    second = event_factory.get_event("SomeEvent")

    assert first == second
    assert first is not second


def test_duplicate_event_factory_registration_raises(event_factory):
    event_factory.register_delegate(SomeEvent(), SomeEvent)

    with pytest.raises(ValueError) as info:
        event_factory.register_delegate(SomeEvent(), SomeEvent)

    assert str(info.value) == 'Factory delegate already registered for type: "SomeEvent"'


def test_unknown_event_type_returns_none(event_factory):
    assert event_factory.get_event("SomeEvent") is None