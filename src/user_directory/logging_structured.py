"""
user_directory.logging_structured
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Formatters for the ``user_directory.*`` loggers.

Activation
----------
Use ``DEFAULT_LOGGING`` as-is, or copy the formatter entries into your own
Django ``LOGGING`` config::

    from user_directory.logging_structured import DEFAULT_LOGGING

    LOGGING = DEFAULT_LOGGING

Fields passed through ``extra`` land in the JSON document::

    logger.info("store built", extra={"records": 2})
    # {"timestamp": "...", "level": "INFO", "logger": "user_directory.bootstrap",
    #  "message": "store built", "records": 2}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any


class StructuredJsonFormatter(logging.Formatter):
    """Emits log records as single-line JSON objects."""

    # Fields pulled from LogRecord that should NOT appear verbatim in the JSON
    _SKIP = frozenset({
        "msg", "args", "levelname", "levelno", "pathname", "filename",
        "module", "exc_info", "exc_text", "stack_info", "lineno",
        "funcName", "created", "msecs", "relativeCreated", "thread",
        "threadName", "processName", "process", "taskName",
        "name", "message",
    })

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()

        doc: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
                                 .strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level":     record.levelname,
            "logger":    record.name,
            "message":   record.message,
        }

        for key, val in record.__dict__.items():
            if key not in self._SKIP and not key.startswith("_"):
                doc[key] = val

        if record.exc_info:
            doc["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            doc["stack"] = self.formatStack(record.stack_info)

        return json.dumps(doc, default=str, ensure_ascii=False)


class StructuredVerboseFormatter(logging.Formatter):
    """
    Human-readable formatter for local development.

    Example output::
        2026-02-23 14:30:00 INFO    user_directory.bootstrap: User directory ready
    """

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")

        line = f"{ts} {record.levelname:<7} {record.name}: {record.message}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


DEFAULT_LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "user_directory.logging_structured.StructuredJsonFormatter",
        },
        "verbose": {
            "()": "user_directory.logging_structured.StructuredVerboseFormatter",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",     # swap to "verbose" for development
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "user_directory": {"level": "INFO", "propagate": True},
    },
}
