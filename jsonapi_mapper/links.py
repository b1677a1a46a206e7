"""Link construction for JSON:API documents."""

from __future__ import annotations


class LinkBuilder:
    """Build fully-qualified JSON:API links under a fixed base URL.

    Segments are joined verbatim: the base URL is used exactly as
    configured, without trailing slash normalization.
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def collection(self, resource_type: str) -> str:
        """Return the link to a resource collection."""
        return f"{self._base_url}/{resource_type}"

    def resource(self, resource_type: str, resource_id: str) -> str:
        """Return the link to a single resource."""
        return f"{self.collection(resource_type)}/{resource_id}"

    def relationship(self, resource_type: str, resource_id: str, relation: str) -> str:
        """Return the relationship link of a resource."""
        return f"{self.resource(resource_type, resource_id)}/relationships/{relation}"

    def related(self, resource_type: str, resource_id: str, relation: str) -> str:
        """Return the related resource link of a resource."""
        return f"{self.resource(resource_type, resource_id)}/{relation}"

    def relationship_links(
        self, resource_type: str, resource_id: str, relation: str
    ) -> dict[str, str]:
        return {
            "self": self.relationship(resource_type, resource_id, relation),
            "related": self.related(resource_type, resource_id, relation),
        }

    def page(self, resource_type: str, limit: int, offset: int) -> str:
        """Return a page[limit]/page[offset] link to a resource collection."""
        return (
            f"{self.collection(resource_type)}"
            f"?page[limit]={limit}&page[offset]={offset}"
        )
