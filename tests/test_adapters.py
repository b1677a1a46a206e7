import pytest

from jsonapi_mapper import Collection, CollectionAdapter, InvalidModelError, Model, adapt
from jsonapi_mapper.adapters import MemoryModelAdapter, filter_attributes


def test_filter_attributes() -> None:
    raw = {"id": 1, "name": "x", "owner_id": 2, "owner_type": "user", "idea": "keep"}

    assert filter_attributes(raw) == {"name": "x", "idea": "keep"}


def test_memory_adapter() -> None:
    related = Model.forge(id=2)
    adapter = adapt(Model({"id": 1, "name": "x", "owner_id": 2}, {"owner": related}, type_="things"))

    assert isinstance(adapter, MemoryModelAdapter)
    assert adapter.id() == "1"
    assert adapter.attributes() == {"name": "x"}
    assert adapter.type() == "things"
    relations = adapter.relations()
    assert list(relations) == ["owner"]
    assert relations["owner"].id() == "2"


def test_memory_adapter_without_relations() -> None:
    adapter = adapt(Model.forge(id=1))

    assert adapter.relations() == {}
    assert adapter.type() is None


def test_absent_relation_is_none() -> None:
    adapter = adapt(Model({"id": 1}, {"owner": None}))

    assert adapter.relations() == {"owner": None}


def test_collection_adapter_preserves_order() -> None:
    adapter = adapt(Collection([Model.forge(id=3), Model.forge(id=1), Model.forge(id=2)]))

    assert isinstance(adapter, CollectionAdapter)
    assert len(adapter) == 3
    assert [model.id() for model in adapter] == ["3", "1", "2"]


def test_missing_id_raises() -> None:
    with pytest.raises(InvalidModelError):
        adapt(Model.forge(name="x")).id()


def test_adapted_values_pass_through() -> None:
    adapter = adapt(Model.forge(id=1))

    assert adapt(adapter) is adapter


def test_nested_collections_are_rejected() -> None:
    with pytest.raises(InvalidModelError):
        adapt([[Model.forge(id=1)]])


def test_unsupported_source_is_rejected() -> None:
    with pytest.raises(InvalidModelError):
        adapt("not a model")
