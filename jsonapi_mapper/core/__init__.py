"""Core JSON:API document and error helpers."""

from .document import JSONAPIDocumentBuilder
from .errors import InvalidModelError, JSONAPIErrorBuilder, JSONAPIMapperError

__all__ = [
    "InvalidModelError",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "JSONAPIMapperError",
]
