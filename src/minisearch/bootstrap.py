"""Factories that build storage backends and the search index from settings."""

from __future__ import annotations

import logging

from motor.motor_asyncio import AsyncIOMotorClient
from opentelemetry.sdk.trace import TracerProvider
import redis.asyncio as redis

from minisearch.adapters.document_store import AbstractDocumentStore, InMemoryDocumentStore, MongoDocumentStore
from minisearch.adapters.inverted_index import AbstractInvertedIndex, InMemoryInvertedIndex, RedisInvertedIndex
from minisearch.config import Settings
from minisearch.observability.logging import configure_logging
from minisearch.observability.tracing import init_tracing
from minisearch.service_layer.search_index import SearchIndex


logger = logging.getLogger(__name__)


def create_document_store(settings: Settings) -> AbstractDocumentStore:
    """Create the configured document store backend."""
    if settings.document_store_backend == "mongo":
        client = AsyncIOMotorClient(settings.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms)
        collection = client[settings.mongo_database][settings.mongo_collection]
        logger.info(
            "Using MongoDB document store %s.%s",
            settings.mongo_database,
            settings.mongo_collection,
        )
        return MongoDocumentStore(collection, client=client)
    return InMemoryDocumentStore()


def create_inverted_index(settings: Settings) -> AbstractInvertedIndex:
    """Create the configured inverted index backend."""
    if settings.inverted_index_backend == "redis":
        client = redis.from_url(
            settings.redis_url,
            socket_timeout=settings.redis_timeout_seconds,
            socket_connect_timeout=settings.redis_timeout_seconds,
            decode_responses=True,
        )
        logger.info("Using Redis inverted index with namespace %s", settings.redis_namespace)
        return RedisInvertedIndex(client, settings.redis_namespace, owns_client=True)
    return InMemoryInvertedIndex()


def configure_observability(settings: Settings) -> TracerProvider:
    """Configure logging and tracing for the search index."""
    configure_logging(settings.log_level, settings.log_json)
    resource_attributes = {
        "minisearch.document_store": settings.document_store_backend,
        "minisearch.inverted_index": settings.inverted_index_backend,
    }
    return init_tracing(service_name="minisearch", resource_attributes=resource_attributes)


def create_search_index(settings: Settings | None = None) -> SearchIndex:
    """Compose a search index from settings (environment when omitted)."""
    settings = settings or Settings()
    if not settings.uses_network_backends():
        logger.info("Using in-memory backends; documents are lost when the process exits")
    return SearchIndex(
        create_document_store(settings),
        create_inverted_index(settings),
        ingest_concurrency=settings.ingest_concurrency,
    )
