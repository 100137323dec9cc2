"""Inverted index abstractions and implementations.

An inverted index maps a normalized token to the set of document ids that
contain it. Postings are membership-only and append-only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
import logging
from typing import TYPE_CHECKING

from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError

from minisearch.domain.model import DocumentId
from minisearch.exceptions import StorageUnavailableError


if TYPE_CHECKING:
    from redis.asyncio import Redis


logger = logging.getLogger(__name__)

DEFAULT_REDIS_NAMESPACE = "minisearchindex"


class AbstractInvertedIndex(ABC):
    """Abstract token -> postings set mapping with an intersection primitive."""

    @abstractmethod
    async def add(self, token: str, document_id: DocumentId) -> None:
        """Register ``document_id`` in the postings set of ``token`` (idempotent)."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, token: str) -> set[DocumentId]:
        """Return the postings set for ``token``; empty when the token is unknown."""
        raise NotImplementedError

    @abstractmethod
    async def get_intersection(self, tokens: Sequence[str]) -> set[DocumentId]:
        """Return ids present in every token's postings set.

        No tokens, or any unknown token, yields an empty set.
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Optional hook for releasing backend connections."""

        return


class InMemoryInvertedIndex(AbstractInvertedIndex):
    """Process-local index backed by a dict of sets."""

    def __init__(self) -> None:
        self._postings: dict[str, set[DocumentId]] = {}

    async def add(self, token: str, document_id: DocumentId) -> None:
        self._postings.setdefault(token, set()).add(document_id)

    async def get(self, token: str) -> set[DocumentId]:
        return set(self._postings.get(token, ()))

    async def get_intersection(self, tokens: Sequence[str]) -> set[DocumentId]:
        if not tokens:
            return set()

        postings: list[set[DocumentId]] = []
        for token in set(tokens):
            entries = self._postings.get(token)
            if not entries:
                return set()
            postings.append(entries)

        # Smallest set first keeps every intermediate result bounded by it
        postings.sort(key=len)
        result = set(postings[0])
        for entries in postings[1:]:
            result &= entries
            if not result:
                break
        return result

    def terms(self) -> Iterable[str]:
        return self._postings.keys()


class RedisInvertedIndex(AbstractInvertedIndex):
    """Index stored as one Redis set per token under ``{namespace}:word:{token}``."""

    BACKEND_NAME = "redis"

    def __init__(self, client: Redis, namespace: str = DEFAULT_REDIS_NAMESPACE, *, owns_client: bool = False) -> None:
        """Initialize with an asyncio Redis client.

        Args:
            client: ``redis.asyncio.Redis`` connection
            namespace: Key prefix isolating this index from other data
            owns_client: Close the client on ``aclose``
        """
        self.client = client
        self.namespace = namespace
        self._owns_client = owns_client

    def key_for(self, token: str) -> str:
        return f"{self.namespace}:word:{token}"

    async def add(self, token: str, document_id: DocumentId) -> None:
        try:
            await self.client.sadd(self.key_for(token), document_id)
        except (RedisConnectionError, RedisTimeoutError) as exc:
            raise StorageUnavailableError(self.BACKEND_NAME, "add", str(exc)) from exc

    async def get(self, token: str) -> set[DocumentId]:
        try:
            members = await self.client.smembers(self.key_for(token))
        except (RedisConnectionError, RedisTimeoutError) as exc:
            raise StorageUnavailableError(self.BACKEND_NAME, "get", str(exc)) from exc
        return _decode_members(members)

    async def get_intersection(self, tokens: Sequence[str]) -> set[DocumentId]:
        if not tokens:
            return set()
        keys = [self.key_for(token) for token in dict.fromkeys(tokens)]
        try:
            members = await self.client.sinter(keys)
        except (RedisConnectionError, RedisTimeoutError) as exc:
            raise StorageUnavailableError(self.BACKEND_NAME, "get_intersection", str(exc)) from exc
        return _decode_members(members)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
            logger.debug("Closed Redis client")


def _decode_members(members: Iterable[bytes | str]) -> set[DocumentId]:
    return {member.decode("utf-8") if isinstance(member, bytes) else member for member in members}
