"""Redis-backed document store.

Each collection is a single Redis hash: the hash field is the document id
and the value is the JSON-encoded document content.
"""

from __future__ import annotations

import json
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..logging import get_logger
from .base import Document, DocumentNotFound, DocumentStore, StoreUnavailable

logger = get_logger(__name__)


class RedisDocumentStore(DocumentStore):
    """Document store over a pooled ``redis.asyncio`` client."""

    def __init__(self, client: redis.Redis, collection_name: str = "profiles"):
        self.client = client
        self.collection_name = collection_name

    @classmethod
    def from_url(
        cls, url: str, collection_name: str = "profiles", max_connections: int = 50
    ) -> RedisDocumentStore:
        """Create a store with its own connection pool."""
        pool = redis.ConnectionPool.from_url(
            url,
            decode_responses=True,
            max_connections=max_connections,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30,
        )
        logger.info(
            "Redis connection pool initialized",
            max_connections=max_connections,
            collection=collection_name,
        )
        return cls(redis.Redis.from_pool(pool), collection_name)

    async def get(self, document_id: str) -> dict[str, Any]:
        try:
            raw = await self.client.hget(self.collection_name, document_id)
        except RedisError as e:
            logger.error("Redis get failed", document_id=document_id, error=str(e))
            raise StoreUnavailable(f"Failed to read document {document_id}: {e}") from e

        if raw is None:
            raise DocumentNotFound(document_id)
        return json.loads(raw)

    async def set(self, document_id: str, content: dict[str, Any]) -> None:
        try:
            await self.client.hset(self.collection_name, document_id, json.dumps(content))
        except RedisError as e:
            logger.error("Redis set failed", document_id=document_id, error=str(e))
            raise StoreUnavailable(f"Failed to write document {document_id}: {e}") from e

    async def list_all(self) -> list[Document]:
        try:
            entries = await self.client.hgetall(self.collection_name)
        except RedisError as e:
            logger.error("Redis list failed", collection=self.collection_name, error=str(e))
            raise StoreUnavailable(f"Failed to list documents: {e}") from e

        return [
            Document(id=document_id, content=json.loads(raw)) for document_id, raw in entries.items()
        ]

    async def health_check(self) -> bool:
        try:
            await self.client.ping()
            return True
        except RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
        logger.info("Redis client closed")
