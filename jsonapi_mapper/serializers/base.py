"""Serialize adapted models into JSON:API resource objects."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from jsonapi_mapper.adapters import CollectionAdapter, ModelAdapter
from jsonapi_mapper.core.errors import InvalidModelError
from jsonapi_mapper.inflection import TypeInflector
from jsonapi_mapper.links import LinkBuilder

log = logging.getLogger(__name__)

ResourceKey = tuple[str, str]
# related model, its resource type and id
RelatedRef = tuple[ModelAdapter, str, str]


class IncludedResources:
    """Side-loaded resources of a document, unique by ``(type, id)``."""

    def __init__(self) -> None:
        self._seen: set[ResourceKey] = set()
        self._resources: list[dict[str, Any]] = []

    def exclude(self, key: ResourceKey) -> None:
        """Never include ``key``, e.g. because it is primary data."""
        self._seen.add(key)

    def __contains__(self, key: ResourceKey) -> bool:
        return key in self._seen

    def add(self, resource: dict[str, Any]) -> None:
        self._seen.add((resource["type"], resource["id"]))
        self._resources.append(resource)

    def resources(self) -> list[dict[str, Any]]:
        return list(self._resources)


class ResourceSerializer:
    """Serialize adapted models into JSON:API resource objects.

    When an ``IncludedResources`` is passed, relations are rendered as
    ``relationships`` and every reachable related resource is side-loaded
    into it, depth first with parents before their own related resources.
    Without one, resources carry no ``relationships`` at all.
    """

    def __init__(self, links: LinkBuilder, type_for_relation: TypeInflector) -> None:
        self.links = links
        self.type_for_relation = type_for_relation

    def to_resource(
        self,
        model: ModelAdapter,
        resource_type: str,
        *,
        included: IncludedResources | None = None,
    ) -> dict[str, Any]:
        """Serialize a model into a JSON:API resource object."""
        resource, related = self._build(
            model, resource_type, with_relationships=included is not None
        )
        if included is not None:
            self._side_load(related, included)
        return resource

    def to_many(
        self,
        collection: CollectionAdapter,
        resource_type: str,
        *,
        included: IncludedResources | None = None,
    ) -> list[dict[str, Any]]:
        """Serialize a collection, preserving its order."""
        return [
            self.to_resource(model, resource_type, included=included)
            for model in collection
        ]

    def get_relationships(
        self, model: ModelAdapter, resource_type: str, resource_id: str
    ) -> tuple[dict[str, Any], list[RelatedRef]]:
        """Return relationship objects and the related models they point to."""
        relationships: dict[str, Any] = {}
        related_refs: list[RelatedRef] = []
        for name, related in model.relations().items():
            if related is None:
                log.debug("Skipping absent relation %r of %s/%s", name, resource_type, resource_id)
                continue
            related_type = self.type_for_relation(name)
            if isinstance(related, CollectionAdapter):
                refs = [
                    ref
                    for ref in (self._reference(item, related_type) for item in related)
                    if ref is not None
                ]
                data: Any = [self._identifier(ref) for ref in refs]
            else:
                ref = self._reference(related, related_type)
                if ref is None:
                    continue
                refs = [ref]
                data = self._identifier(ref)
            related_refs.extend(refs)
            relationships[name] = {
                "data": data,
                "links": self.links.relationship_links(resource_type, resource_id, name),
            }
        return relationships, related_refs

    def _build(
        self, model: ModelAdapter, resource_type: str, *, with_relationships: bool
    ) -> tuple[dict[str, Any], list[RelatedRef]]:
        resource_id = model.id()
        resource: dict[str, Any] = {"id": resource_id, "type": resource_type}
        attributes = model.attributes()
        if attributes:
            resource["attributes"] = attributes
        related: list[RelatedRef] = []
        if with_relationships:
            relationships, related = self.get_relationships(model, resource_type, resource_id)
            if relationships:
                resource["relationships"] = relationships
        resource["links"] = {"self": self.links.resource(resource_type, resource_id)}
        return resource, related

    def _side_load(self, related: list[RelatedRef], included: IncludedResources) -> None:
        """Add every resource reachable from ``related`` to ``included``.

        Walks with an explicit stack so arbitrarily deep relation chains
        do not hit the interpreter's recursion limit.
        """
        pending: list[Iterator[RelatedRef]] = [iter(related)]
        while pending:
            ref = next(pending[-1], None)
            if ref is None:
                pending.pop()
                continue
            model, related_type, related_id = ref
            if (related_type, related_id) in included:
                continue
            resource, children = self._build(model, related_type, with_relationships=True)
            included.add(resource)
            pending.append(iter(children))

    def _reference(self, related: ModelAdapter, related_type: str) -> RelatedRef | None:
        try:
            return related, related_type, related.id()
        except InvalidModelError:
            log.debug("Skipping related %s resource without id", related_type)
            return None

    def _identifier(self, ref: RelatedRef) -> dict[str, str]:
        _, resource_type, resource_id = ref
        return {"id": resource_id, "type": resource_type}
