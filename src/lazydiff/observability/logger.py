"""Structured JSON logger for lazydiff.

Each log record is written as one JSON object per line, e.g.::

    {"ts": "2025-07-01T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "lazydiff.window", "message": "windowed diff unavailable",
     "reason": "empty_window", "visible_range": "4...6"}

Usage::

    from lazydiff.observability import get_logger

    log = get_logger("lazydiff.window")
    log.debug("windowed diff unavailable", extra={"extra_fields": {"reason": "..."}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts``, ``level``, ``logger`` and ``message``.
    Fields passed via ``extra={"extra_fields": {...}}`` are merged into the
    top-level object; ``exception`` and ``stack_info`` appear when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name, so repeated ``get_logger`` calls never stack
# duplicate handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "lazydiff",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"lazydiff"``.
    level:
        Minimum log level as an ``int`` or a case-insensitive name.  Only
        applied the first time *name* is configured.  Defaults to
        ``WARNING`` so fallback diagnostics logged at ``DEBUG`` stay quiet
        unless the caller lowers the level.  Library modules configure their
        loggers at import, so lower those with ``Logger.setLevel``.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
