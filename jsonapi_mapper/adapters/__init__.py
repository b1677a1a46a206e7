"""Source model adapters."""

from __future__ import annotations

from typing import Any

from jsonapi_mapper.core.errors import InvalidModelError
from jsonapi_mapper.models import Collection, Model

from .base import Adapted, CollectionAdapter, ModelAdapter, filter_attributes
from .memory import MemoryModelAdapter, adapt_memory
from .sqlalchemy import SQLAlchemyModelAdapter, is_mapped_instance

__all__ = [
    "Adapted",
    "CollectionAdapter",
    "MemoryModelAdapter",
    "ModelAdapter",
    "SQLAlchemyModelAdapter",
    "adapt",
    "filter_attributes",
]


def adapt(source: Any) -> Adapted:
    """Return the adapter for a supported model or collection."""
    if isinstance(source, (ModelAdapter, CollectionAdapter)):
        return source
    if isinstance(source, (Model, Collection)):
        return adapt_memory(source)
    if isinstance(source, (list, tuple)):
        return CollectionAdapter(_adapt_one(item) for item in source)
    if is_mapped_instance(source):
        return SQLAlchemyModelAdapter(source)
    raise InvalidModelError(f"Unsupported model type: {type(source).__name__}.")


def _adapt_one(source: Any) -> ModelAdapter:
    adapted = adapt(source)
    if isinstance(adapted, CollectionAdapter):
        raise InvalidModelError("A collection cannot contain another collection.")
    return adapted
