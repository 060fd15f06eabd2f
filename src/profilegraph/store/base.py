"""Core document store interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Document:
    """A stored document together with the key it is addressed by."""

    id: str
    content: dict[str, Any] = field(default_factory=dict)


class StoreException(Exception):
    """Base exception for document store operations."""

    pass


class DocumentNotFound(StoreException):
    """No document is stored under the requested key."""

    def __init__(self, document_id: str):
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id


class StoreUnavailable(StoreException):
    """The backing store could not be reached or failed mid-operation."""

    pass


class DocumentStore(ABC):
    """Abstract base class for key-addressed document stores.

    Document content never carries its own key; callers reconstruct the
    identifier from :attr:`Document.id` when listing.
    """

    @abstractmethod
    async def get(self, document_id: str) -> dict[str, Any]:
        """Fetch the content stored under ``document_id``.

        Raises:
            DocumentNotFound: If nothing is stored under the key
            StoreUnavailable: On backend failure
        """
        pass

    @abstractmethod
    async def set(self, document_id: str, content: dict[str, Any]) -> None:
        """Store ``content`` under ``document_id``, replacing any previous content."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Document]:
        """Return every stored document."""
        pass

    async def health_check(self) -> bool:
        """Check whether the store is reachable."""
        return True

    async def close(self) -> None:
        """Release any held connections."""
        return None
