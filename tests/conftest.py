import pytest

from jsonapi_mapper import Mapper

DOMAIN = "https://domain.com"


@pytest.fixture
def domain() -> str:
    return DOMAIN


@pytest.fixture
def mapper() -> Mapper:
    return Mapper(DOMAIN)
