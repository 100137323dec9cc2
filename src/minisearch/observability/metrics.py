"""Prometheus metrics for ingestion and query golden signals."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


DOCUMENTS_INDEXED = Counter(
    "minisearch_documents_indexed_total",
    "Documents stored and fully registered in the inverted index",
)

INGESTION_FAILURES = Counter(
    "minisearch_ingestion_failures_total",
    "Documents whose ingestion failed",
    ["error_type"],
)

QUERY_COUNT = Counter(
    "minisearch_queries_total",
    "Conjunctive queries answered",
    ["outcome"],
)

INGEST_LATENCY = Histogram(
    "minisearch_ingest_latency_seconds",
    "Per-document ingestion latency",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

QUERY_LATENCY = Histogram(
    "minisearch_query_latency_seconds",
    "Query latency",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5),
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        target = histogram.labels(**labels) if labels else histogram
        target.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Get content type for metrics endpoint."""
    return CONTENT_TYPE_LATEST
