"""Pagination base class for JSON:API links."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonapi_mapper.links import LinkBuilder
    from jsonapi_mapper.options import Pagination


class PaginationBase(ABC):
    """Define pagination API for JSON:API."""

    @abstractmethod
    def get_links(
        self, links: LinkBuilder, resource_type: str, pagination: Pagination
    ) -> dict[str, str]:
        """Return JSON:API pagination links."""
