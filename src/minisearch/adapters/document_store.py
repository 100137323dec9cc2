"""Document store abstractions and implementations.

A document store persists raw document text and hands back an opaque,
store-assigned identifier. The search core depends on nothing beyond
``store_document`` and ``get_documents``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
import logging
from typing import TYPE_CHECKING, Any

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import ConnectionFailure

from minisearch.domain.model import DocumentId
from minisearch.exceptions import DocumentNotFoundError, InvalidDocumentIdError, StorageUnavailableError


if TYPE_CHECKING:
    from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection


logger = logging.getLogger(__name__)


class AbstractDocumentStore(ABC):
    """Abstract store for raw document content keyed by opaque identifiers."""

    @abstractmethod
    async def store_document(self, content: str) -> DocumentId:
        """Persist ``content`` atomically and return a fresh identifier."""
        raise NotImplementedError

    @abstractmethod
    async def get_documents(self, ids: Sequence[DocumentId]) -> list[str]:
        """Return the content for each id, in the same order as ``ids``.

        Raises:
            DocumentNotFoundError: an id was never issued by this store
            StorageUnavailableError: the backend could not be reached
        """
        raise NotImplementedError

    def ordering_key(self, document_id: DocumentId) -> Any:
        """Sort key that reproduces the order documents were stored in."""

        return document_id

    async def aclose(self) -> None:
        """Optional hook for releasing backend connections."""

        return


class InMemoryDocumentStore(AbstractDocumentStore):
    """Process-local store backed by a dict.

    Ids are the decimal insertion index ("0", "1", ...). Unknown ids raise
    ``DocumentNotFoundError``.
    """

    def __init__(self) -> None:
        self._documents: dict[DocumentId, str] = {}

    async def store_document(self, content: str) -> DocumentId:
        document_id = str(len(self._documents))
        self._documents[document_id] = content
        return document_id

    async def get_documents(self, ids: Sequence[DocumentId]) -> list[str]:
        missing = [document_id for document_id in ids if document_id not in self._documents]
        if missing:
            raise DocumentNotFoundError(missing)
        return [self._documents[document_id] for document_id in ids]

    def ordering_key(self, document_id: DocumentId) -> Any:
        try:
            return int(document_id)
        except ValueError:
            return -1

    def __len__(self) -> int:
        return len(self._documents)


class MongoDocumentStore(AbstractDocumentStore):
    """Store documents in a MongoDB collection as ``{"content": text}``.

    Ids are ObjectId hex strings. Unknown ids raise ``DocumentNotFoundError``;
    strings that are not valid ObjectIds raise ``InvalidDocumentIdError``.
    ObjectId hex leads with the creation timestamp followed by a per-process
    counter, so the default ``ordering_key`` already follows insertion order.
    """

    BACKEND_NAME = "mongodb"

    def __init__(self, collection: AsyncIOMotorCollection, *, client: AsyncIOMotorClient | None = None) -> None:
        """Initialize with a motor collection.

        Args:
            collection: Collection holding the documents
            client: Client to close on ``aclose``; leave unset when the caller owns it
        """
        self.collection = collection
        self._client = client

    async def store_document(self, content: str) -> DocumentId:
        try:
            result = await self.collection.insert_one({"content": content})
        except ConnectionFailure as exc:
            raise StorageUnavailableError(self.BACKEND_NAME, "store_document", str(exc)) from exc
        return str(result.inserted_id)

    async def get_documents(self, ids: Sequence[DocumentId]) -> list[str]:
        if not ids:
            return []
        object_ids = [self._to_object_id(document_id) for document_id in ids]

        try:
            cursor = self.collection.find({"_id": {"$in": object_ids}})
            rows = await cursor.to_list(length=None)
        except ConnectionFailure as exc:
            raise StorageUnavailableError(self.BACKEND_NAME, "get_documents", str(exc)) from exc

        by_id = {str(row["_id"]): row.get("content", "") for row in rows}
        keys = [str(object_id) for object_id in object_ids]
        missing = [document_id for document_id, key in zip(ids, keys) if key not in by_id]
        if missing:
            raise DocumentNotFoundError(missing)
        return [by_id[key] for key in keys]

    async def aclose(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.debug("Closed MongoDB client")

    @staticmethod
    def _to_object_id(document_id: DocumentId) -> ObjectId:
        try:
            return ObjectId(document_id)
        except (InvalidId, TypeError) as exc:
            raise InvalidDocumentIdError([str(document_id)], f"Not a MongoDB ObjectId: {document_id!r}") from exc
