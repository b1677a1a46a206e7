import pytest

from jsonapi_mapper import InvalidModelError, Mapper, adapt
from jsonapi_mapper.adapters import SQLAlchemyModelAdapter
from jsonapi_mapper.schemas import JSONAPIDocument

from .conftest import DOMAIN
from .orm_models import Article, Comment, User, make_article


def test_adapts_mapped_instance() -> None:
    adapter = adapt(make_article())

    assert isinstance(adapter, SQLAlchemyModelAdapter)
    assert adapter.id() == "1"
    assert adapter.type() == "articles"
    assert adapter.attributes() == {"title": "Hello"}


def test_unloaded_relations_are_absent() -> None:
    adapter = adapt(make_article())

    assert adapter.relations() == {}


def test_instance_without_primary_key_has_no_id() -> None:
    with pytest.raises(InvalidModelError):
        adapt(Article(title="Draft")).id()


def test_list_of_instances_is_a_collection(mapper: Mapper) -> None:
    result = mapper.map([make_article(id=2), make_article(id=1)], "articles", {"relations": False})

    assert [resource["id"] for resource in result["data"]] == ["2", "1"]
    assert result["data"][0]["attributes"] == {"title": "Hello"}


def test_maps_loaded_relationships(mapper: Mapper) -> None:
    article = make_article()
    article.author = User(id=3, name="Ann")
    article.comments = [Comment(id=10, body="First"), Comment(id=11, body="Second")]

    result = mapper.map(article, "articles")

    relationships = result["data"]["relationships"]
    assert relationships["author"]["data"] == {"id": "3", "type": "authors"}
    assert relationships["author"]["links"]["related"] == DOMAIN + "/articles/1/author"
    assert relationships["comments"]["data"] == [
        {"id": "10", "type": "comments"},
        {"id": "11", "type": "comments"},
    ]
    keys = [(item["type"], item["id"]) for item in result["included"]]
    assert keys == [("authors", "3"), ("comments", "10"), ("comments", "11")]
    assert result["included"][1]["attributes"] == {"body": "First"}
    JSONAPIDocument.model_validate(result)


def test_relationship_set_to_none_is_skipped(mapper: Mapper) -> None:
    article = make_article()
    article.author = None

    result = mapper.map(article, "articles")

    assert "relationships" not in result["data"]
    assert "included" not in result


def test_mapped_instance_as_memory_relation(mapper: Mapper) -> None:
    from jsonapi_mapper import Model

    model = Model({"id": "5"}, {"article": make_article(id=9, title="Linked")})

    result = mapper.map(model, "bookmarks")

    assert result["data"]["relationships"]["article"]["data"] == {"id": "9", "type": "articles"}
    assert result["included"][0]["attributes"] == {"title": "Linked"}
