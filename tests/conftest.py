"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from minisearch.adapters.document_store import InMemoryDocumentStore
from minisearch.adapters.inverted_index import InMemoryInvertedIndex
from minisearch.service_layer.search_index import SearchIndex


# Test environment that overrides every config value Settings reads
TEST_ENV = {
    "LOG_LEVEL": "info",
    "LOG_JSON": "true",
    "DOCUMENT_STORE_BACKEND": "memory",
    "INVERTED_INDEX_BACKEND": "memory",
    "MONGO_URI": "mongodb://localhost:27017",
    "MONGO_DATABASE": "minisearch_test",
    "MONGO_COLLECTION": "documents",
    "MONGO_TIMEOUT_MS": "1000",
    "REDIS_URL": "redis://localhost:6379/15",
    "REDIS_NAMESPACE": "minisearchtest",
    "REDIS_TIMEOUT_SECONDS": "1.0",
    "INGEST_CONCURRENCY": "1",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value


EXAMPLE_DOCUMENTS = [
    "Example document with a single sentence",
    "Example document with multiple sentences. And punctuation",
    "",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset environment variables before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def search_index() -> SearchIndex:
    return SearchIndex(InMemoryDocumentStore(), InMemoryInvertedIndex())


@pytest.fixture
def example_documents() -> list[str]:
    return list(EXAMPLE_DOCUMENTS)
