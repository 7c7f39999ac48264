"""Unit tests for structured logging helpers."""
import structlog

from coincollector.core.logging import (
    LoggingContext,
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    rename_message_field,
)


def test_add_correlation_id_keeps_bound_value():
    event = add_correlation_id(None, "info", {"correlation_id": "cid_fixed"})

    assert event["correlation_id"] == "cid_fixed"


def test_add_correlation_id_generates_one():
    event = add_correlation_id(None, "info", {})

    assert event["correlation_id"].startswith("cid_")


def test_rename_message_field():
    event = rename_message_field(None, "info", {"event": "Group saved", "group_id": "g1"})

    assert event == {"message": "Group saved", "group_id": "g1"}


def test_correlation_id_binding_and_clearing():
    bind_correlation_id("cid_abc")
    assert structlog.contextvars.get_contextvars()["correlation_id"] == "cid_abc"

    clear_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_logging_context_unbinds_on_exit():
    with LoggingContext(user_id="u1"):
        assert structlog.contextvars.get_contextvars()["user_id"] == "u1"

    assert "user_id" not in structlog.contextvars.get_contextvars()
