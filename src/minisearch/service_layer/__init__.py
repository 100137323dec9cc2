"""Service layer - ingestion and query orchestration over the storage adapters."""

from .search_index import SearchIndex


__all__ = [
    "SearchIndex",
]
