"""Structured Logging — one line per record, carrying the registry context.

Invariants:
    - Every line has timestamp, level, logger and message
    - teacher_email, student_email, error_code, count and path appear only when set
    - setup_logging() leaves exactly one classroom handler on the root logger,
      however many times the lifespan runs

Design Decisions:
    - Formatters on stdlib logging; registries receive their Logger at construction
    - "text" format keeps the same context, appended as key=value pairs
    - Timestamps come from the record, not from formatting time
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = ("teacher_email", "student_email", "error_code", "count", "path")


def record_context(record: logging.LogRecord) -> dict:
    return {
        key: getattr(record, key)
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """Registry log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local runs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = record_context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the classroom handler on the root logger, replacing an earlier one."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "classroom_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    handler.classroom_handler = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
