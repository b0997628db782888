import pytest

from ycq.eventbus import InternalEventBus
from ycq.messages import EventMessage
from ycq.naming import new_uuid
from ycq.simplecqrs.domain import (
    InventoryItemCreated,
    InventoryItemDeactivated,
    InventoryItemRenamed,
    ItemsCheckedIntoInventory,
    ItemsRemovedFromInventory,
)
from ycq.simplecqrs.readmodel import (
    InventoryItemDetailsDto,
    InventoryItemDetailView,
    InventoryItemListDto,
    InventoryListView,
    ReadModel,
    ReadModelDatabase,
)


@pytest.fixture
def db():
    return ReadModelDatabase()


@pytest.fixture
def views(db):
    return InventoryListView(db), InventoryItemDetailView(db), ReadModel(db)


def publish(views, item_id, event, version=None):
    list_view, detail_view, _ = views
    message = EventMessage(item_id, event, version)
    list_view.handle(message)
    detail_view.handle(message)


def test_created_item_appears_in_list_and_details(views):
    item_id = new_uuid()
    publish(views, item_id, InventoryItemCreated(item_id, "Widget"))
    model = views[2]

    assert model.get_inventory_items() == [InventoryItemListDto(item_id, "Widget")]
    assert model.get_inventory_item_details(item_id) == InventoryItemDetailsDto(
        id=item_id, name="Widget", current_count=0, version=0
    )


def test_rename_updates_name_and_version(views):
    item_id = new_uuid()
    publish(views, item_id, InventoryItemCreated(item_id, "Widget"), 0)
    publish(views, item_id, InventoryItemRenamed(item_id, "Gadget"), 7)
    model = views[2]

    assert model.get_inventory_items()[0].name == "Gadget"
    details = model.get_inventory_item_details(item_id)
    assert details.name == "Gadget"
    assert details.version == 7


def test_counts_follow_check_in_and_remove(views):
    item_id = new_uuid()
    publish(views, item_id, InventoryItemCreated(item_id, "Widget"))
    publish(views, item_id, ItemsCheckedIntoInventory(item_id, 10))
    publish(views, item_id, ItemsRemovedFromInventory(item_id, 4))

    assert views[2].get_inventory_item_details(item_id).current_count == 10 - 4


def test_deactivate_removes_item_everywhere(views):
    keep, drop = new_uuid(), new_uuid()
    publish(views, keep, InventoryItemCreated(keep, "Keep"))
    publish(views, drop, InventoryItemCreated(drop, "Drop"))
    publish(views, drop, InventoryItemDeactivated(drop))
    model = views[2]

    assert [dto.id for dto in model.get_inventory_items()] == [keep]
    assert model.get_inventory_item_details(drop) is None
    assert model.get_inventory_item_details(keep).name == "Keep"


def test_unknown_details_is_none(views):
    assert views[2].get_inventory_item_details(new_uuid()) is None


def test_get_details_item_unknown_raises(views):
    with pytest.raises(LookupError, match="did not find the original inventory"):
        views[1].get_details_item(new_uuid())


def test_detail_event_for_missing_item_raises(views):
    item_id = new_uuid()
    with pytest.raises(LookupError):
        views[1].handle(EventMessage(item_id, ItemsCheckedIntoInventory(item_id, 1)))


def test_list_view_ignores_rename_of_unknown_item(views):
    item_id = new_uuid()
    views[0].handle(EventMessage(item_id, InventoryItemRenamed(item_id, "Ghost")))
    assert views[2].get_inventory_items() == []


def test_views_subscribed_on_event_bus(db):
    bus = InternalEventBus()
    bus.add_handler(InventoryListView(db), InventoryItemCreated, InventoryItemRenamed)
    bus.add_handler(InventoryItemDetailView(db), InventoryItemCreated, ItemsCheckedIntoInventory)
    item_id = new_uuid()

    bus.publish_event(EventMessage(item_id, InventoryItemCreated(item_id, "Widget"), 0))
    bus.publish_event(EventMessage(item_id, ItemsCheckedIntoInventory(item_id, 3), 1))

    model = ReadModel(db)
    assert model.get_inventory_items() == [InventoryItemListDto(item_id, "Widget")]
    assert model.get_inventory_item_details(item_id).current_count == 3


def test_get_inventory_items_returns_copy(views):
    item_id = new_uuid()
    publish(views, item_id, InventoryItemCreated(item_id, "Widget"))
    items = views[2].get_inventory_items()
    items.clear()
    assert len(views[2].get_inventory_items()) == 1