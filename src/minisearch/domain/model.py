"""Domain values exchanged between the orchestrator and its callers.

Documents themselves are plain strings and identifiers are opaque,
store-assigned strings; only ingestion outcomes need a richer shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from minisearch.exceptions import PartialIngestionError


DocumentId: TypeAlias = str


@dataclass(slots=True, frozen=True)
class IngestionFailure:
    """One document that could not be fully ingested."""

    position: int
    error_type: str
    message: str

    @classmethod
    def from_exception(cls, position: int, exc: BaseException) -> IngestionFailure:
        return cls(position=position, error_type=type(exc).__name__, message=str(exc))

    def to_dict(self) -> dict[str, int | str]:
        return {
            "position": self.position,
            "error_type": self.error_type,
            "message": self.message,
        }


@dataclass(slots=True)
class IngestionReport:
    """Outcome of a batch or streaming ingestion.

    Documents listed in ``document_ids`` are fully indexed; failed documents
    never roll back the ones ingested before them.
    """

    attempted: int = 0
    document_ids: list[DocumentId] = field(default_factory=list)
    failures: list[IngestionFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.document_ids)

    @property
    def ok(self) -> bool:
        return not self.failures

    def record_success(self, document_id: DocumentId) -> None:
        self.attempted += 1
        self.document_ids.append(document_id)

    def record_failure(self, position: int, exc: BaseException) -> None:
        self.attempted += 1
        self.failures.append(IngestionFailure.from_exception(position, exc))

    def raise_for_failures(self) -> None:
        """Raise ``PartialIngestionError`` if any document failed."""
        if self.failures:
            raise PartialIngestionError(self)

    def to_dict(self) -> dict[str, object]:
        return {
            "attempted": self.attempted,
            "succeeded": self.succeeded,
            "document_ids": list(self.document_ids),
            "failures": [failure.to_dict() for failure in self.failures],
        }
