"""Observability module for OpenTelemetry-aligned tracing, metrics, and logging."""

from minisearch.observability.context import get_trace_context, set_trace_context, trace_context
from minisearch.observability.logging import JsonFormatter, configure_logging
from minisearch.observability.metrics import (
    DOCUMENTS_INDEXED,
    INGEST_LATENCY,
    INGESTION_FAILURES,
    QUERY_COUNT,
    QUERY_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)
from minisearch.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "DOCUMENTS_INDEXED",
    "INGESTION_FAILURES",
    "INGEST_LATENCY",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "set_trace_context",
    "trace_context",
    "track_latency",
]
