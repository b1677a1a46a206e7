import pytest
from pydantic import ValidationError

from jsonapi_mapper import MapperOptions, Pagination
from jsonapi_mapper.options import resolve_options


def test_defaults() -> None:
    options = resolve_options(None)

    assert options.relations is True
    assert options.pagination is None


def test_mapping_is_validated() -> None:
    options = resolve_options({"relations": False, "pagination": {"limit": "10", "offset": 0, "total": 30}})

    assert options.relations is False
    assert options.pagination == Pagination(limit=10, offset=0, total=30)


def test_instance_passes_through() -> None:
    options = MapperOptions(relations=False)

    assert resolve_options(options) is options


def test_pagination_requires_all_bounds() -> None:
    with pytest.raises(ValidationError):
        resolve_options({"pagination": {"limit": 10}})
