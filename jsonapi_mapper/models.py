"""Plain in-memory models for sources that are not ORM instances."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping


class Model:
    """An entity with an attribute bag and named relations.

    ``id`` lives in the attribute bag, as it does for ORM rows. Relation
    values may also be lists of models or SQLAlchemy mapped instances.
    """

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        relations: Mapping[str, Related] | None = None,
        *,
        type_: str | None = None,
    ) -> None:
        self.attributes: dict[str, Any] = dict(attributes or {})
        self.relations: dict[str, Related] = dict(relations or {})
        self.type_ = type_

    @classmethod
    def forge(cls, **attributes: Any) -> "Model":
        """Create a model from keyword attributes."""
        return cls(attributes)

    @property
    def id(self) -> Any:
        return self.attributes.get("id")

    def __repr__(self) -> str:
        return f"Model(id={self.id!r}, type_={self.type_!r})"


class Collection:
    """Ordered sequence of models."""

    def __init__(self, models: Iterable[Model] = ()) -> None:
        self.models: list[Model] = list(models)

    def __iter__(self) -> Iterator[Model]:
        return iter(self.models)

    def __len__(self) -> int:
        return len(self.models)

    def __getitem__(self, index: int) -> Model:
        return self.models[index]

    def __repr__(self) -> str:
        return f"Collection({self.models!r})"


Related = Model | Collection | None
