"""Tests for structured logging helpers."""

import structlog

from profilegraph.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    request_id_ctx,
    set_request_context,
)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(len(request_id) == 14 for request_id in ids)


def test_request_context_is_added_to_events():
    set_request_context(request_id="req-123", operation="GetAll")
    try:
        event = RequestContextFilter()(None, "info", {"event": "hello"})
        assert event == {"event": "hello", "request_id": "req-123", "graphql_operation": "GetAll"}
        assert request_id_ctx.get() == "req-123"
    finally:
        clear_request_context()

    assert RequestContextFilter()(None, "info", {"event": "hello"}) == {"event": "hello"}


def test_set_request_context_generates_id():
    try:
        request_id = set_request_context()
        assert request_id == request_id_ctx.get()
    finally:
        clear_request_context()


def test_configure_logging_selects_renderer():
    configure_logging(debug=False)
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    configure_logging(debug=True)
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
    assert get_logger("profilegraph.test") is not None
