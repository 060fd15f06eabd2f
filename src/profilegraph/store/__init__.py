"""
Document store adapters backing profile records
"""

from .base import (
    Document,
    DocumentNotFound,
    DocumentStore,
    StoreException,
    StoreUnavailable,
)
from .factory import create_document_store
from .memory import InMemoryDocumentStore

__all__ = [
    "Document",
    "DocumentNotFound",
    "DocumentStore",
    "InMemoryDocumentStore",
    "StoreException",
    "StoreUnavailable",
    "create_document_store",
]
