"""Domain layer - identifiers and ingestion outcomes, no infrastructure dependencies."""

from minisearch.domain.model import DocumentId, IngestionFailure, IngestionReport


__all__ = [
    "DocumentId",
    "IngestionFailure",
    "IngestionReport",
]
