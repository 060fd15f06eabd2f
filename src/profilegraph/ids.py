"""
Identifier generation for newly created documents
"""

import uuid
from typing import Protocol


class IdGenerator(Protocol):
    """Produces collision-resistant unique string identifiers."""

    def next(self) -> str: ...


class UUIDGenerator:
    """Random UUID4 identifiers, rendered in canonical hyphenated form."""

    def next(self) -> str:
        return str(uuid.uuid4())
