"""Pagination link strategies for JSON:API."""

from .base import PaginationBase
from .standard import OffsetPagination

__all__ = ["OffsetPagination", "PaginationBase"]
