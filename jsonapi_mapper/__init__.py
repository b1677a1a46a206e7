"""Map ORM models and collections into JSON:API v1.1 documents."""

from .adapters import CollectionAdapter, ModelAdapter, adapt
from .core.document import JSONAPIDocumentBuilder
from .core.errors import InvalidModelError, JSONAPIErrorBuilder, JSONAPIMapperError
from .inflection import pluralize
from .links import LinkBuilder
from .mapper import Mapper
from .models import Collection, Model
from .options import MapperOptions, Pagination

__all__ = [
    "Collection",
    "CollectionAdapter",
    "InvalidModelError",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPIMapperError",
    "LinkBuilder",
    "Mapper",
    "MapperOptions",
    "Model",
    "ModelAdapter",
    "Pagination",
    "adapt",
    "pluralize",
]
