"""Tests for the in-memory document store."""

import pytest

from profilegraph.store import Document, DocumentNotFound, InMemoryDocumentStore


class TestInMemoryDocumentStore:
    """Test in-memory document store."""

    @pytest.mark.asyncio
    async def test_set_and_get(self, store: InMemoryDocumentStore) -> None:
        await store.set("a", {"name": "A"})
        assert await store.get("a") == {"name": "A"}

    @pytest.mark.asyncio
    async def test_get_missing(self, store: InMemoryDocumentStore) -> None:
        with pytest.raises(DocumentNotFound) as exc_info:
            await store.get("missing")
        assert exc_info.value.document_id == "missing"

    @pytest.mark.asyncio
    async def test_set_overwrites(self, store: InMemoryDocumentStore) -> None:
        await store.set("a", {"name": "A", "extra": 1})
        await store.set("a", {"name": "B"})
        assert await store.get("a") == {"name": "B"}
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_list_all_in_insertion_order(self, store: InMemoryDocumentStore) -> None:
        await store.set("b", {"n": 2})
        await store.set("a", {"n": 1})
        assert await store.list_all() == [
            Document(id="b", content={"n": 2}),
            Document(id="a", content={"n": 1}),
        ]

    @pytest.mark.asyncio
    async def test_list_all_empty(self, store: InMemoryDocumentStore) -> None:
        assert await store.list_all() == []

    @pytest.mark.asyncio
    async def test_content_is_copied(self, store: InMemoryDocumentStore) -> None:
        content = {"tags": ["x"]}
        await store.set("a", content)
        content["tags"].append("y")

        fetched = await store.get("a")
        fetched["tags"].append("z")

        assert await store.get("a") == {"tags": ["x"]}

    @pytest.mark.asyncio
    async def test_health_and_close(self, store: InMemoryDocumentStore) -> None:
        assert await store.health_check() is True
        await store.close()
