"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging

from failure_reporter.logging import JsonFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="failure_reporter.reporting.submitter",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="FAILURE REPORT (Manual Processing Required): Title: %s",
        args=("Crash",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_message_and_extra() -> None:
    line = JsonFormatter().format(_record(reason="transport", detail="HTTP 502"))

    payload = json.loads(line)
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "failure_reporter.reporting.submitter"
    assert payload["message"] == "FAILURE REPORT (Manual Processing Required): Title: Crash"
    assert payload["extra"] == {"reason": "transport", "detail": "HTTP 502"}
    assert "failure_report" not in payload


def test_fallback_report_fields_are_lifted_to_top_level() -> None:
    line = JsonFormatter().format(
        _record(
            title="Crash",
            description="App crashed on load",
            system="macOS/arm64/1.2.3",
            timestamp="2024-01-01T00:00:00Z",
            manual_processing_required=True,
            request_id="abc",
        )
    )

    payload = json.loads(line)
    assert payload["manual_processing_required"] is True
    assert payload["failure_report"] == {
        "title": "Crash",
        "description": "App crashed on load",
        "system": "macOS/arm64/1.2.3",
        "timestamp": "2024-01-01T00:00:00Z",
    }
    assert payload["extra"] == {"request_id": "abc"}
    # The record's own emission time is untouched by the report timestamp.
    assert payload["timestamp"] != "2024-01-01T00:00:00Z"


def test_json_formatter_omits_empty_extra() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    assert "extra" not in payload
    assert "exception" not in payload
    assert "manual_processing_required" not in payload
