"""Tests for the document store factory."""

from unittest.mock import patch

import pytest

from profilegraph.config import Settings
from profilegraph.store import InMemoryDocumentStore, create_document_store


class TestCreateDocumentStore:
    def test_memory(self) -> None:
        store = create_document_store(Settings(store_backend="memory", collection_name="people"))

        assert isinstance(store, InMemoryDocumentStore)
        assert store.collection_name == "people"

    def test_backend_name_is_case_insensitive(self) -> None:
        store = create_document_store(Settings(store_backend="MEMORY"))
        assert isinstance(store, InMemoryDocumentStore)

    @patch("profilegraph.store.factory.RedisDocumentStore")
    def test_redis(self, mock_redis) -> None:  # type: ignore[reportUnknownArgumentType]
        settings = Settings(store_backend="redis", redis_url="redis://cache:6379/1")

        create_document_store(settings)

        mock_redis.from_url.assert_called_once_with(
            "redis://cache:6379/1",
            collection_name="profiles",
            max_connections=50,
        )

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown document store backend"):
            create_document_store(Settings(store_backend="mongo"))

    def test_settings_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PROFILEGRAPH_STORE_BACKEND", "redis")
        monkeypatch.setenv("PROFILEGRAPH_COLLECTION_NAME", "bruh")

        settings = Settings()

        assert settings.store_backend == "redis"
        assert settings.collection_name == "bruh"
