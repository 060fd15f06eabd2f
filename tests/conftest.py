"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
from graphql import GraphQLSchema

from profilegraph.graphql.resolvers import ResolverContext, build_profile_resolvers
from profilegraph.graphql.schema import create_schema
from profilegraph.store import InMemoryDocumentStore


class SequentialIds:
    """Deterministic id generator: profile-1, profile-2, ..."""

    def __init__(self, prefix: str = "profile"):
        self.prefix = prefix
        self.issued = 0

    def next(self) -> str:
        self.issued += 1
        return f"{self.prefix}-{self.issued}"


@pytest.fixture(scope="session")
def schema() -> GraphQLSchema:
    return create_schema()


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def id_generator() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def resolvers():
    return build_profile_resolvers()


@pytest.fixture
def context(store: InMemoryDocumentStore, id_generator: SequentialIds) -> ResolverContext:
    return ResolverContext(store=store, id_generator=id_generator)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
