"""Adapter interface between source models and the document mapper."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Mapping

from jsonapi_mapper.core.errors import InvalidModelError

EXCLUDED_SUFFIXES = ("_id", "_type")


def filter_attributes(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Drop ``id`` and foreign key / polymorphic type columns from an attribute bag."""
    return {
        key: value
        for key, value in raw.items()
        if key != "id" and not key.endswith(EXCLUDED_SUFFIXES)
    }


class ModelAdapter(ABC):
    """Read-only view over a single source model."""

    def id(self) -> str:
        """Return the model id as a string."""
        value = self.raw_id()
        if value is None:
            raise InvalidModelError(f"{self.describe()} has no id.")
        return str(value)

    def attributes(self) -> dict[str, Any]:
        return filter_attributes(self.raw_attributes())

    def type(self) -> str | None:
        """Return the source's own type name, if it declares one."""
        return None

    def describe(self) -> str:
        return type(self).__name__

    @abstractmethod
    def raw_id(self) -> Any:
        """Return the unconverted id, or ``None``."""

    @abstractmethod
    def raw_attributes(self) -> Mapping[str, Any]:
        """Return every attribute of the source, including ``id``."""

    @abstractmethod
    def relations(self) -> dict[str, ModelAdapter | CollectionAdapter | None]:
        """Return the adapted relations by name."""


class CollectionAdapter:
    """Ordered sequence of adapted models."""

    def __init__(self, models: Iterable[ModelAdapter]) -> None:
        self._models = list(models)

    def __iter__(self) -> Iterator[ModelAdapter]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)


Adapted = ModelAdapter | CollectionAdapter
