"""minisearch - a minimal conjunctive full-text search engine.

Documents are tokenized into lowercase words, stored in a document store and
indexed in a word -> document id inverted index. Queries return every
document containing all requested words.
"""

from minisearch.adapters import (
    AbstractDocumentStore,
    AbstractInvertedIndex,
    InMemoryDocumentStore,
    InMemoryInvertedIndex,
    MongoDocumentStore,
    RedisInvertedIndex,
)
from minisearch.bootstrap import create_search_index
from minisearch.config import Settings
from minisearch.domain import DocumentId, IngestionFailure, IngestionReport
from minisearch.exceptions import (
    DocumentNotFoundError,
    InvalidDocumentIdError,
    MinisearchError,
    PartialIngestionError,
    StorageUnavailableError,
)
from minisearch.search.analyzers import normalize_word, tokenize
from minisearch.service_layer import SearchIndex


__all__ = [
    "AbstractDocumentStore",
    "AbstractInvertedIndex",
    "DocumentId",
    "DocumentNotFoundError",
    "InMemoryDocumentStore",
    "InMemoryInvertedIndex",
    "IngestionFailure",
    "IngestionReport",
    "InvalidDocumentIdError",
    "MinisearchError",
    "MongoDocumentStore",
    "PartialIngestionError",
    "RedisInvertedIndex",
    "SearchIndex",
    "Settings",
    "StorageUnavailableError",
    "create_search_index",
    "normalize_word",
    "tokenize",
]
