"""Resource object serialization."""

from .base import IncludedResources, ResourceSerializer

__all__ = ["IncludedResources", "ResourceSerializer"]
