"""
Tests for request-scoped logging context
"""

import json
import logging

import structlog

from projectdesk.logging import (
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(100)}

    assert len(ids) == 100
    assert all(len(request_id) == 14 for request_id in ids)


def test_request_context_is_merged_into_events():
    set_request_context(request_id="abc", graphql_operation="GetProject")
    try:
        event = structlog.contextvars.merge_contextvars(None, "info", {"event": "hello"})
        assert event["request_id"] == "abc"
        assert event["graphql_operation"] == "GetProject"
    finally:
        clear_request_context()

    assert get_request_id() is None
    assert structlog.contextvars.merge_contextvars(None, "info", {"event": "hello"}) == {
        "event": "hello"
    }


def test_set_request_context_generates_id():
    try:
        request_id = set_request_context()
        assert request_id
        assert get_request_id() == request_id
    finally:
        clear_request_context()


def test_json_output_carries_request_id(capsys):
    configure_logging(debug=False, log_level="info")
    set_request_context(request_id="req-1")
    try:
        get_logger("projectdesk.tests").info("Client created", client_id="c1")
    finally:
        clear_request_context()
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "Client created"
    assert event["request_id"] == "req-1"
    assert event["client_id"] == "c1"
    assert event["level"] == "info"


def test_unknown_log_level_falls_back_to_info():
    try:
        configure_logging(log_level="chatty")
        assert logging.getLogger().level == logging.INFO
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()
