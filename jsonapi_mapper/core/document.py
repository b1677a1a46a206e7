"""JSON:API document construction templates."""

from typing import Any, Iterable, Mapping


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents from mapped resource objects."""

    def build_single(
        self,
        resource: Mapping[str, Any],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a single resource object."""
        return self._envelope(dict(resource), included=included, links=links)

    def build_collection(
        self,
        resources: Iterable[Mapping[str, Any]],
        *,
        included: Iterable[Mapping[str, Any]] | None = None,
        links: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API document for a collection of resources."""
        data = [dict(item) for item in resources]
        return self._envelope(data, included=included, links=links)

    def build_error(self, errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API error document from error objects."""
        return {"errors": [dict(error) for error in errors]}

    def _envelope(
        self,
        data: Any,
        *,
        included: Iterable[Mapping[str, Any]] | None,
        links: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        document: dict[str, Any] = {"data": data}
        included = list(included or [])
        if included:
            document["included"] = [dict(item) for item in included]
        if links:
            document["links"] = dict(links)
        return document
