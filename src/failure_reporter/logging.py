"""Structured logging configuration.

Uses standard library logging with a JSON formatter.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

_RESERVED_LOG_RECORD_ATTRS: set[str] = {
    "args",
    "asctime",
    "created",
    "exc_info",
    "exc_text",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "message",
    "msg",
    "name",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "taskName",
    "thread",
    "threadName",
}

# Report fields attached to the fallback record, in the order they are logged.
_FAILURE_REPORT_FIELDS: tuple[str, ...] = ("title", "description", "system", "timestamp")


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object.

    Attributes passed through ``extra=`` end up under the ``extra`` key. Records
    flagged ``manual_processing_required`` are the only durable copy of a report
    that never reached GitHub: their report fields are lifted into a top-level
    ``failure_report`` object so they can be collected from the log stream.
    """

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (record)
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_RECORD_ATTRS and not key.startswith("_")
        }
        if extra.pop("manual_processing_required", False):
            payload["manual_processing_required"] = True
            payload["failure_report"] = {
                field: extra.pop(field) for field in _FAILURE_REPORT_FIELDS if field in extra
            }
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(level: str) -> None:
    """Configure root logging with structured JSON output."""

    root = logging.getLogger()

    # Remove any existing handlers to avoid duplicate logs when re-configuring.
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonFormatter())

    root.addHandler(handler)
    root.setLevel(level.upper())

    # requests logs every connection at DEBUG through urllib3.
    logging.getLogger("urllib3").setLevel(max(root.level, logging.INFO))
