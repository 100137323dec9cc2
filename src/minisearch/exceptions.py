"""Error taxonomy shared by the search core and its storage backends."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from minisearch.domain.model import IngestionReport


class MinisearchError(Exception):
    """Base error for the search engine."""


class StorageUnavailableError(MinisearchError):
    """Raised when a document store or inverted index backend cannot complete an operation.

    The core never retries; the error is propagated to whoever invoked the
    orchestrator operation that triggered it.
    """

    def __init__(self, backend: str, operation: str, detail: str = "") -> None:
        self.backend = backend
        self.operation = operation
        message = f"{backend} unavailable during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DocumentNotFoundError(MinisearchError):
    """Raised when a store is asked for ids it never issued.

    The orchestrator only looks up ids obtained from ``store_document``, so
    this signals drift between the document store and the inverted index.
    """

    def __init__(self, document_ids: Sequence[str], message: str | None = None) -> None:
        self.document_ids = list(document_ids)
        super().__init__(message or f"Unknown document ids: {', '.join(self.document_ids)}")


class InvalidDocumentIdError(DocumentNotFoundError):
    """Raised when an id is malformed for the backend (e.g. not an ObjectId)."""


class PartialIngestionError(MinisearchError):
    """Raised on demand when a batch or stream finished with failed documents."""

    def __init__(self, report: IngestionReport) -> None:
        self.report = report
        super().__init__(f"{len(report.failures)} of {report.attempted} documents failed to ingest")
