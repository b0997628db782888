import uuid

from ycq.naming import new_uuid, type_name


class SomeCommand:
    pass


class SomeEvent:
    def __init__(self, item: str = "", count: int = 0) -> None:
        self.item = item
        self.count = count


def test_type_name_of_instance():
    assert type_name(SomeCommand()) == "SomeCommand"


def test_type_name_of_class_matches_instance():
    assert type_name(SomeEvent) == type_name(SomeEvent("Some String", 42))


def test_type_name_of_class():
    assert type_name(SomeEvent) == "SomeEvent"


def test_new_uuid_is_version_four_canonical():
    value = new_uuid()
    parsed = uuid.UUID(value)
    assert parsed.version == 4
    assert str(parsed) == value
    assert len(value) == 36


def test_new_uuid_is_unique():
    values = {new_uuid() for _ in range(100)}
    assert len(values) == 100