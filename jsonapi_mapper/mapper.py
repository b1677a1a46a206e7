"""Map ORM models and collections into JSON:API documents."""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_mapper.adapters import CollectionAdapter, adapt
from jsonapi_mapper.core.document import JSONAPIDocumentBuilder
from jsonapi_mapper.core.errors import JSONAPIMapperError
from jsonapi_mapper.inflection import TypeInflector, pluralize
from jsonapi_mapper.links import LinkBuilder
from jsonapi_mapper.options import OptionsInput, resolve_options
from jsonapi_mapper.pagination import OffsetPagination, PaginationBase
from jsonapi_mapper.serializers import IncludedResources, ResourceSerializer

log = logging.getLogger(__name__)


class Mapper:
    """Build JSON:API documents rooted at a fixed base URL.

    Example::

        mapper = Mapper("https://domain.com")
        document = mapper.map(article, "articles", {"relations": False})

    The mapper keeps no state between calls; ``map`` may be used
    concurrently.
    """

    def __init__(
        self,
        base_url: str,
        *,
        type_for_relation: TypeInflector = pluralize,
        pagination: PaginationBase | None = None,
    ) -> None:
        self._links = LinkBuilder(base_url)
        self._serializer = ResourceSerializer(self._links, type_for_relation)
        self._pagination = pagination or OffsetPagination()
        self._documents = JSONAPIDocumentBuilder()

    @property
    def base_url(self) -> str:
        return self._links.base_url

    def map(self, model: Any, resource_type: str, options: OptionsInput = None) -> dict[str, Any]:
        """Return the JSON:API document for a model or a collection.

        Raises ``InvalidModelError`` when the input is not a supported model
        or when a primary model has no id.
        """
        resolved = resolve_options(options)
        source = adapt(model)
        is_collection = isinstance(source, CollectionAdapter)
        primary = list(source) if is_collection else [source]

        included: IncludedResources | None = None
        if resolved.relations:
            included = IncludedResources()
            # primary resources are never side-loaded
            for item in primary:
                included.exclude((resource_type, item.id()))

        links = {"self": self._links.collection(resource_type)}
        if resolved.pagination is not None:
            links.update(
                self._pagination.get_links(self._links, resource_type, resolved.pagination)
            )

        if is_collection:
            resources = self._serializer.to_many(source, resource_type, included=included)
            side_loaded = included.resources() if included is not None else None
            document = self._documents.build_collection(
                resources, included=side_loaded, links=links
            )
        else:
            resource = self._serializer.to_resource(source, resource_type, included=included)
            side_loaded = included.resources() if included is not None else None
            document = self._documents.build_single(
                resource, included=side_loaded, links=links
            )
        log.debug(
            "Mapped %d %s resource(s) with %d included",
            len(primary),
            resource_type,
            len(side_loaded or []),
        )
        return document

    def error_document(self, error: JSONAPIMapperError) -> dict[str, Any]:
        """Return a JSON:API error document describing ``error``."""
        return self._documents.build_error([error.to_error_object()])
