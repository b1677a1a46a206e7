"""Per-call mapping options."""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class Pagination(BaseModel):
    """Window of a paginated collection: page size, start and total size."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: int
    offset: int
    total: int


class MapperOptions(BaseModel):
    """Options accepted by ``Mapper.map``.

    ``relations`` toggles the ``relationships`` blocks and the ``included``
    section; ``pagination`` adds first/prev/next/last links when present.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    relations: bool = True
    pagination: Pagination | None = None


OptionsInput = MapperOptions | Mapping[str, Any] | None


def resolve_options(options: OptionsInput) -> MapperOptions:
    """Return ``MapperOptions`` from an instance, a mapping or ``None``."""
    if options is None:
        return MapperOptions()
    if isinstance(options, MapperOptions):
        return options
    return MapperOptions.model_validate(dict(options))
