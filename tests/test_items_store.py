import pytest
from pydantic import ValidationError

from app.application.queries import GetItem, ListItems, get_container
from app.domain.errors import ItemNotFoundError
from app.domain.models import Item
from app.infrastructure.memory.repositories import InMemoryItemRepository, SEED_ITEMS


def test_default_store_holds_reference_dataset():
    repo = InMemoryItemRepository()
    assert list(repo.list_items()) == list(SEED_ITEMS)
    assert len(repo.list_items()) == 3


def test_get_item_returns_none_when_missing():
    repo = InMemoryItemRepository()
    assert repo.get_item(2).name == "Item 2"
    assert repo.get_item(42) is None


def test_duplicate_ids_are_rejected():
    with pytest.raises(ValueError):
        InMemoryItemRepository([Item(id=1, name="a"), Item(id=1, name="b")])


def test_items_are_immutable():
    item = Item(id=1, name="a")
    with pytest.raises(ValidationError):
        item.name = "b"


@pytest.mark.parametrize("kwargs", [
    {"id": 0, "name": "a"},
    {"id": -3, "name": "a"},
    {"id": 1, "name": ""},
])
def test_item_field_rules(kwargs):
    with pytest.raises(ValidationError):
        Item(**kwargs)


def test_description_may_be_empty():
    assert Item(id=5, name="x").description == ""


def test_list_items_query_keeps_order():
    repo = InMemoryItemRepository([Item(id=7, name="g"), Item(id=3, name="c")])
    assert [i.id for i in ListItems(repo).execute()] == [7, 3]


def test_get_item_query_parses_numeric_ids():
    query = GetItem(InMemoryItemRepository())
    assert query.execute("3").id == 3
    assert query.execute("03").id == 3
    assert query.execute("+1").id == 1
    for missing in ("999", "0", "-1"):
        with pytest.raises(ItemNotFoundError):
            query.execute(missing)


@pytest.mark.parametrize("raw", ["", "abc", "1abc", " 1", "1.5", "١"])
def test_get_item_query_rejects_unparseable_ids(raw):
    with pytest.raises(ItemNotFoundError) as exc_info:
        GetItem(InMemoryItemRepository()).execute(raw)
    assert exc_info.value.raw_id == raw


def test_container_wires_in_memory_repository(settings):
    container = get_container(settings)
    assert container.settings is settings
    assert isinstance(container.repo, InMemoryItemRepository)
