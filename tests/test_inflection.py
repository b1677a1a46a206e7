import pytest

from jsonapi_mapper.inflection import identity, pluralize


@pytest.mark.parametrize(
    "name, expected",
    [
        ("related-model", "related-models"),
        ("related-models", "related-models"),
        ("author", "authors"),
        ("comments", "comments"),
        ("category", "categories"),
        ("blog_post", "blog_posts"),
        ("children", "children"),
        ("address", "addresses"),
        ("billing-address", "billing-addresses"),
        ("class", "classes"),
        ("bus", "buses"),
        ("buses", "buses"),
        ("statuses", "statuses"),
        ("person", "people"),
    ],
)
def test_pluralize(name: str, expected: str) -> None:
    assert pluralize(name) == expected


def test_identity_keeps_name() -> None:
    assert identity("related-model") == "related-model"
