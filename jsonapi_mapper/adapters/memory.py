"""Adapter for the in-memory ``Model`` and ``Collection`` containers."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_mapper.core.errors import InvalidModelError
from jsonapi_mapper.models import Collection, Model

from .base import CollectionAdapter, ModelAdapter

log = logging.getLogger(__name__)


class MemoryModelAdapter(ModelAdapter):
    def __init__(self, model: Model) -> None:
        self._model = model

    def raw_id(self) -> Any:
        return self._model.id

    def raw_attributes(self) -> Mapping[str, Any]:
        return self._model.attributes

    def type(self) -> str | None:
        return self._model.type_

    def describe(self) -> str:
        return repr(self._model)

    def relations(self) -> dict[str, ModelAdapter | CollectionAdapter | None]:
        # relation values may be any supported source, e.g. a list or a mapped instance
        from . import adapt

        relations: dict[str, ModelAdapter | CollectionAdapter | None] = {}
        for name, related in self._model.relations.items():
            if related is None:
                relations[name] = None
                continue
            try:
                relations[name] = adapt(related)
            except InvalidModelError:
                log.debug("Treating unsupported relation %r of %r as absent", name, self._model)
                relations[name] = None
        return relations


def adapt_memory(source: Model | Collection) -> ModelAdapter | CollectionAdapter:
    if isinstance(source, Collection):
        return CollectionAdapter(MemoryModelAdapter(model) for model in source)
    return MemoryModelAdapter(source)
