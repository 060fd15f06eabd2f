"""Factory for creating document stores from settings."""

from ..config import Settings
from ..logging import get_logger
from .base import DocumentStore
from .memory import InMemoryDocumentStore
from .redis import RedisDocumentStore

logger = get_logger(__name__)


def create_document_store(settings: Settings) -> DocumentStore:
    """Create the document store selected by ``settings.store_backend``.

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = settings.store_backend.lower()

    if backend == "memory":
        logger.info("Using in-memory document store", collection=settings.collection_name)
        return InMemoryDocumentStore(settings.collection_name)
    elif backend == "redis":
        return RedisDocumentStore.from_url(
            settings.redis_url,
            collection_name=settings.collection_name,
            max_connections=settings.redis_max_connections,
        )
    else:
        raise ValueError(f"Unknown document store backend: {settings.store_backend}")
