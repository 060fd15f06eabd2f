"""In-process document store for development and tests."""

import copy
from typing import Any

from ..logging import get_logger
from .base import Document, DocumentNotFound, DocumentStore

logger = get_logger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """Dictionary-backed store; content is copied on the way in and out."""

    def __init__(self, collection_name: str = "profiles"):
        self.collection_name = collection_name
        self._documents: dict[str, dict[str, Any]] = {}

    async def get(self, document_id: str) -> dict[str, Any]:
        try:
            content = self._documents[document_id]
        except KeyError:
            raise DocumentNotFound(document_id) from None
        return copy.deepcopy(content)

    async def set(self, document_id: str, content: dict[str, Any]) -> None:
        logger.debug("Storing document", collection=self.collection_name, document_id=document_id)
        self._documents[document_id] = copy.deepcopy(content)

    async def list_all(self) -> list[Document]:
        return [
            Document(id=document_id, content=copy.deepcopy(content))
            for document_id, content in self._documents.items()
        ]

    def __len__(self) -> int:
        return len(self._documents)
