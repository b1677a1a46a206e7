"""Pydantic schemas describing the documents produced by the mapper."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    type: str
    id: str


class JSONAPIRelationship(BaseModel):
    """Relationship object with linkage and self/related links."""

    data: Union[JSONAPIResourceIdentifier, List[JSONAPIResourceIdentifier], None] = None
    links: Optional[Dict[str, str]] = None


class JSONAPIResource(BaseModel):
    """Resource object with attributes, relationships and links."""

    type: str
    id: str
    attributes: Optional[Dict[str, Any]] = None
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None
    links: Optional[Dict[str, str]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    data: Union[JSONAPIResource, List[JSONAPIResource], None] = None
    included: Optional[List[JSONAPIResource]] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, str]] = None


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[Dict[str, Any]]
