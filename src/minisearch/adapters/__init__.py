"""Adapters layer - storage capability contracts and their backends.

The search core depends only on the abstract classes; in-memory backends
serve tests and single-process use, MongoDB and Redis serve shared storage.
"""

from .document_store import (
    AbstractDocumentStore,
    InMemoryDocumentStore,
    MongoDocumentStore,
)
from .inverted_index import (
    AbstractInvertedIndex,
    InMemoryInvertedIndex,
    RedisInvertedIndex,
)


__all__ = [
    "AbstractDocumentStore",
    "AbstractInvertedIndex",
    "InMemoryDocumentStore",
    "InMemoryInvertedIndex",
    "MongoDocumentStore",
    "RedisInvertedIndex",
]
