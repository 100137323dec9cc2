"""Search index orchestration layer.

Composes a document store and an inverted index: ingestion tokenizes each
document, stores the raw text and registers every distinct token against the
returned id; queries intersect postings and resolve ids back to text.

The two stores are independent and non-transactional. A document whose store
write succeeded but whose token registrations partly failed stays stored and
is only partially searchable; that drift is logged, never repaired here.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable, Iterable, Sequence
import logging

from minisearch.adapters.document_store import AbstractDocumentStore
from minisearch.adapters.inverted_index import AbstractInvertedIndex
from minisearch.domain.model import DocumentId, IngestionReport
from minisearch.observability.metrics import (
    DOCUMENTS_INDEXED,
    INGEST_LATENCY,
    INGESTION_FAILURES,
    QUERY_COUNT,
    QUERY_LATENCY,
    track_latency,
)
from minisearch.observability.tracing import create_span
from minisearch.search.analyzers import normalize_word, tokenize


logger = logging.getLogger(__name__)


class SearchIndex:
    """Conjunctive full-text search over a document store and an inverted index."""

    def __init__(
        self,
        document_store: AbstractDocumentStore,
        inverted_index: AbstractInvertedIndex,
        *,
        ingest_concurrency: int = 1,
    ) -> None:
        """Initialize the orchestrator with its two storage capabilities.

        Args:
            document_store: Where raw document text lives
            inverted_index: Token -> document id postings
            ingest_concurrency: Documents in flight during ``add_documents``;
                1 keeps ingestion strictly sequential
        """
        if ingest_concurrency < 1:
            raise ValueError(f"ingest_concurrency must be >= 1, got {ingest_concurrency}")
        self.document_store = document_store
        self.inverted_index = inverted_index
        self.ingest_concurrency = ingest_concurrency

    async def __aenter__(self) -> SearchIndex:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def add_document(self, text: str) -> DocumentId:
        """Store ``text`` and index every distinct token it contains.

        Returns only after the store write and all token registrations have
        settled. If any registration fails, the first error is re-raised once
        the others have finished; the document stays stored.
        """
        with create_span("minisearch.add_document") as span, track_latency(INGEST_LATENCY):
            tokens = set(tokenize(text))
            document_id = await self.document_store.store_document(text)
            span.set_attribute("minisearch.document_id", document_id)
            span.set_attribute("minisearch.distinct_tokens", len(tokens))

            results = await asyncio.gather(
                *(self.inverted_index.add(token, document_id) for token in tokens),
                return_exceptions=True,
            )
            errors = [result for result in results if isinstance(result, BaseException)]
            if errors:
                logger.warning(
                    "Document %s stored but %d of %d token registrations failed; it is not fully searchable",
                    document_id,
                    len(errors),
                    len(tokens),
                    extra={"document_id": document_id},
                )
                raise errors[0]

            DOCUMENTS_INDEXED.inc()
            logger.debug("Indexed document %s with %d distinct tokens", document_id, len(tokens))
            return document_id

    async def add_documents(self, texts: Sequence[str]) -> IngestionReport:
        """Ingest a batch of documents, continuing past failures.

        With ``ingest_concurrency == 1`` documents are stored in input order.
        Otherwise up to ``ingest_concurrency`` documents are in flight and
        store order follows completion order.
        """
        if isinstance(texts, str):
            raise TypeError("add_documents expects a sequence of texts, not a single string")

        report = IngestionReport()
        with create_span("minisearch.add_documents", attributes={"minisearch.batch_size": len(texts)}):
            if self.ingest_concurrency == 1:
                for position, text in enumerate(texts):
                    await self._ingest(position, text, report)
            else:
                semaphore = asyncio.Semaphore(self.ingest_concurrency)

                async def _bounded(position: int, text: str) -> None:
                    async with semaphore:
                        await self._ingest(position, text, report)

                await asyncio.gather(*(_bounded(position, text) for position, text in enumerate(texts)))

        self._log_summary("Batch", report)
        return report

    async def add_documents_stream(self, source: Iterable[str] | AsyncIterable[str]) -> IngestionReport:
        """Ingest documents from a pull-based source, one at a time.

        The next item is requested only after the current document is fully
        indexed, so at most one document is held in memory. Failed documents
        are recorded and the stream keeps going.
        """
        if isinstance(source, str):
            raise TypeError("add_documents_stream expects an iterable of texts, not a single string")

        report = IngestionReport()
        with create_span("minisearch.add_documents_stream") as span:
            if isinstance(source, AsyncIterable):
                position = 0
                async for text in source:
                    await self._ingest(position, text, report)
                    position += 1
            else:
                for position, text in enumerate(source):
                    await self._ingest(position, text, report)
            span.set_attribute("minisearch.attempted", report.attempted)

        self._log_summary("Stream", report)
        return report

    async def find_with_words(self, words: Sequence[str]) -> list[str]:
        """Return every document containing all ``words``, in document-store order.

        Each word is only case-folded, not split, so callers must pass words
        individually. No words or no match yields an empty list.
        """
        if isinstance(words, str):
            raise TypeError("find_with_words expects a sequence of words, not a single string")

        with create_span("minisearch.find_with_words", attributes={"minisearch.word_count": len(words)}):
            with track_latency(QUERY_LATENCY):
                normalized = [normalize_word(word) for word in words]
                if not normalized:
                    QUERY_COUNT.labels(outcome="miss").inc()
                    return []

                matched = await self.inverted_index.get_intersection(normalized)
                if not matched:
                    QUERY_COUNT.labels(outcome="miss").inc()
                    return []

                ordered_ids = sorted(matched, key=self.document_store.ordering_key)
                documents = await self.document_store.get_documents(ordered_ids)

        QUERY_COUNT.labels(outcome="hit").inc()
        logger.debug("Query %s matched %d documents", normalized, len(documents))
        return documents

    async def aclose(self) -> None:
        """Release connections held by both backends."""
        await self.document_store.aclose()
        await self.inverted_index.aclose()

    async def _ingest(self, position: int, text: str, report: IngestionReport) -> None:
        try:
            document_id = await self.add_document(text)
        except Exception as exc:
            INGESTION_FAILURES.labels(error_type=type(exc).__name__).inc()
            logger.warning(
                "Failed to ingest document at position %d: %s",
                position,
                exc,
                exc_info=logger.isEnabledFor(logging.DEBUG),
            )
            report.record_failure(position, exc)
            return
        report.record_success(document_id)

    def _log_summary(self, kind: str, report: IngestionReport) -> None:
        level = logging.INFO if report.ok else logging.WARNING
        logger.log(
            level,
            "%s ingestion finished: %d/%d documents indexed, %d failed",
            kind,
            report.succeeded,
            report.attempted,
            len(report.failures),
        )
