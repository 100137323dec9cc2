"""Unit tests for settings and backend bootstrap."""

import logging

from pydantic import ValidationError
import pytest

from minisearch.adapters.document_store import InMemoryDocumentStore, MongoDocumentStore
from minisearch.adapters.inverted_index import InMemoryInvertedIndex, RedisInvertedIndex
from minisearch.bootstrap import (
    configure_observability,
    create_document_store,
    create_inverted_index,
    create_search_index,
)
from minisearch.config import Settings
from minisearch.observability import tracing as tracing_module
from minisearch.observability.logging import JsonFormatter


@pytest.mark.unit
def test_settings_read_test_environment():
    settings = Settings()

    assert settings.redis_namespace == "minisearchtest"
    assert settings.mongo_database == "minisearch_test"
    assert settings.ingest_concurrency == 1
    assert settings.uses_network_backends() is False


@pytest.mark.unit
def test_settings_env_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("ingest_concurrency", "4")
    monkeypatch.delenv("INGEST_CONCURRENCY")

    assert Settings().ingest_concurrency == 4


@pytest.mark.unit
@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("ingest_concurrency", 0),
        ("mongo_timeout_ms", 0),
        ("redis_timeout_seconds", 0),
        ("document_store_backend", "sqlite"),
        ("inverted_index_backend", "postgres"),
    ],
)
def test_settings_reject_invalid_values(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


@pytest.mark.unit
def test_settings_reject_empty_namespace_for_redis():
    with pytest.raises(ValueError, match="REDIS_NAMESPACE"):
        Settings(inverted_index_backend="redis", redis_namespace="  ")


@pytest.mark.unit
def test_empty_namespace_is_allowed_for_memory_index():
    assert Settings(redis_namespace="").redis_namespace == ""


@pytest.mark.unit
@pytest.mark.asyncio
async def test_default_settings_build_in_memory_backends():
    search_index = create_search_index()

    assert isinstance(search_index.document_store, InMemoryDocumentStore)
    assert isinstance(search_index.inverted_index, InMemoryInvertedIndex)
    assert search_index.ingest_concurrency == 1
    await search_index.aclose()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_network_settings_build_mongo_and_redis_backends():
    settings = Settings(
        document_store_backend="mongo",
        inverted_index_backend="redis",
        ingest_concurrency=2,
    )

    store = create_document_store(settings)
    index = create_inverted_index(settings)

    assert isinstance(store, MongoDocumentStore)
    assert store.collection.name == "documents"
    assert isinstance(index, RedisInvertedIndex)
    assert index.key_for("word") == "minisearchtest:word:word"
    assert settings.uses_network_backends() is True

    # Neither client has connected yet; closing must still succeed
    await store.aclose()
    await index.aclose()


@pytest.mark.unit
def test_configure_observability_sets_up_logging_and_tracing(monkeypatch):
    installed = []
    monkeypatch.setattr(tracing_module.trace, "set_tracer_provider", installed.append)
    monkeypatch.setitem(tracing_module._tracer_holder, "tracer", None)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        provider = configure_observability(
            Settings(log_level="debug", log_json=True, inverted_index_backend="redis")
        )

        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[-1].formatter, JsonFormatter)
        assert logging.getLogger("pymongo").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

    assert installed == [provider]
    assert provider.resource.attributes["service.name"] == "minisearch"
    assert provider.resource.attributes["minisearch.document_store"] == "memory"
    assert provider.resource.attributes["minisearch.inverted_index"] == "redis"
    assert tracing_module._tracer_holder["tracer"] is not None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_in_memory_backends_are_logged(caplog):
    with caplog.at_level(logging.INFO, logger="minisearch.bootstrap"):
        search_index = create_search_index()

    assert "in-memory backends" in caplog.text
    await search_index.aclose()
