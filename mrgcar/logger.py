"""
Logging setup for the API and the seed scripts.

Everything goes through the stdlib ``logging`` package. ``setup_logging()``
configures the ``mrgcar`` logger tree once per process (it is safe to call
again, e.g. by every ``create_app()`` in tests):

- a custom ``HTTP`` level (15) sits between DEBUG and INFO and is used for
  request start/finish lines;
- development: colorized single line ``HH:MM:SS level: message {extra}``;
- production: one JSON object per line, ready for log aggregation;
- test: silent unless ``LOG_LEVEL`` is set explicitly (records still
  propagate, so pytest's ``caplog`` sees them).

Extra fields passed with ``extra={...}`` are rendered by both formatters.
"""
from __future__ import annotations

import datetime as dt
import json
import logging
import logging.config
import sys

from .config import Settings, get_settings

SERVICE_NAME = "mrgcar-api"

HTTP = 15
logging.addLevelName(HTTP, "HTTP")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

_COLORS = {
    "ERROR": "\x1b[31m",
    "CRITICAL": "\x1b[31m",
    "WARNING": "\x1b[33m",
    "INFO": "\x1b[36m",
    "HTTP": "\x1b[35m",
    "DEBUG": "\x1b[90m",
}
_RESET = "\x1b[0m"


def extra_fields(record: logging.LogRecord) -> dict:
    """Return the ``extra={...}`` fields attached to a record."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class DevFormatter(logging.Formatter):
    """Human readable: ``12:01:33 http: REQ GET /v1/cars {"request_id": ...}``."""

    def __init__(self, use_colors: bool | None = None):
        super().__init__(datefmt="%H:%M:%S")
        if use_colors is None:
            use_colors = sys.stdout.isatty()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname.lower()
        if self.use_colors:
            level = f"{_COLORS.get(record.levelname, '')}{level}{_RESET}"

        line = f"{self.formatTime(record, self.datefmt)} {level}: {record.getMessage()}"
        meta = extra_fields(record)
        if meta:
            line += " " + json.dumps(meta, default=str, ensure_ascii=False)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": dt.datetime.fromtimestamp(record.created, tz=dt.timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
            "service": SERVICE_NAME,
        }
        payload.update(extra_fields(record))
        if record.exc_info:
            payload["stack"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


def resolve_level(settings: Settings) -> str:
    if settings.log_level:
        return settings.log_level.upper()
    return "INFO" if settings.is_production else "DEBUG"


def setup_logging(settings: Settings | None = None) -> None:
    """Configure the ``mrgcar`` loggers from the environment."""
    settings = settings or get_settings()
    silent = settings.is_test and not settings.log_level

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "dev": {"()": DevFormatter},
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if settings.is_production else "dev",
                    "stream": "ext://sys.stdout",
                },
                "null": {"class": "logging.NullHandler"},
            },
            "loggers": {
                "mrgcar": {
                    "level": resolve_level(settings),
                    "handlers": ["null"] if silent else ["console"],
                    "propagate": True,
                },
            },
        }
    )
