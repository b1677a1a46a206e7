"""Offset based JSON:API pagination links."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import PaginationBase

if TYPE_CHECKING:
    from jsonapi_mapper.links import LinkBuilder
    from jsonapi_mapper.options import Pagination


class OffsetPagination(PaginationBase):
    """page[offset]/page[limit] pagination links.

    Offsets are plain arithmetic on the requested window and are not
    clamped: ``prev`` and ``last`` may be negative when ``offset < limit``
    or ``total < limit``. Callers validate their pagination input.
    """

    def get_links(
        self, links: LinkBuilder, resource_type: str, pagination: Pagination
    ) -> dict[str, str]:
        """Build first/prev/next/last links for a collection."""
        limit = pagination.limit
        offset = pagination.offset

        def build_url(page_offset: int) -> str:
            return links.page(resource_type, limit, page_offset)

        return {
            "first": build_url(0),
            "prev": build_url(offset - limit),
            "next": build_url(offset + limit),
            "last": build_url(pagination.total - limit),
        }
