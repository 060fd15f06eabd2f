"""Tests for identifier generation."""

import uuid

from profilegraph.ids import UUIDGenerator


def test_uuid_generator_issues_distinct_uuid4_strings():
    generator = UUIDGenerator()
    ids = [generator.next() for _ in range(100)]

    assert len(set(ids)) == 100
    assert all(uuid.UUID(value).version == 4 for value in ids)
