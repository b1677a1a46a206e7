"""Adapter for SQLAlchemy mapped instances."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from sqlalchemy.inspection import inspect

from .base import CollectionAdapter, ModelAdapter


def is_mapped_instance(value: Any) -> bool:
    """Return True if ``value`` is an instance of a SQLAlchemy mapped class."""
    return inspect(value, raiseerr=False) is not None and not isinstance(value, type)


class SQLAlchemyModelAdapter(ModelAdapter):
    """Expose a mapped instance through its already loaded state.

    Only values present in the instance state are read, so unloaded columns
    and relationships never trigger a lazy load; they are treated as absent.
    """

    def __init__(self, instance: Any) -> None:
        self._instance = instance
        self._state = inspect(instance)
        self._mapper = self._state.mapper

    def raw_id(self) -> Any:
        identity = self._state.identity
        if identity is not None:
            return identity[0] if len(identity) == 1 else ",".join(str(v) for v in identity)
        loaded = self._state.dict
        keys = [self._mapper.get_property_by_column(column).key for column in self._mapper.primary_key]
        values = [loaded.get(key) for key in keys]
        if any(value is None for value in values):
            return None
        return values[0] if len(values) == 1 else ",".join(str(v) for v in values)

    def raw_attributes(self) -> Mapping[str, Any]:
        loaded = self._state.dict
        return {
            prop.key: loaded[prop.key]
            for prop in self._mapper.column_attrs
            if prop.key in loaded
        }

    def type(self) -> str | None:
        return getattr(self._mapper.class_, "__tablename__", None)

    def describe(self) -> str:
        return f"{self._mapper.class_.__name__} instance"

    def relations(self) -> dict[str, ModelAdapter | CollectionAdapter | None]:
        loaded = self._state.dict
        relations: dict[str, ModelAdapter | CollectionAdapter | None] = {}
        for relationship in self._mapper.relationships:
            if relationship.key not in loaded:
                continue
            related = loaded[relationship.key]
            if related is None:
                relations[relationship.key] = None
            elif relationship.uselist:
                relations[relationship.key] = adapt_sqlalchemy_many(related)
            else:
                relations[relationship.key] = SQLAlchemyModelAdapter(related)
        return relations


def adapt_sqlalchemy_many(instances: Iterable[Any]) -> CollectionAdapter:
    return CollectionAdapter(SQLAlchemyModelAdapter(instance) for instance in instances)
