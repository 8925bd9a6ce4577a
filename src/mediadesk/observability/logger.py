"""Structured JSON logger for mediadesk.

Each log record is written as one JSON object per line, so upload
activity can be shipped to a log pipeline without extra parsing.

Typical output::

    {"ts": "2026-10-19T12:00:00.123456+00:00", "level": "INFO",
     "logger": "mediadesk.upload", "message": "upload succeeded",
     "target": "inline", "key": "1700000000000_k3j9x0qz1a.png"}

Usage::

    from mediadesk.observability import get_logger

    log = get_logger("mediadesk.editor")
    log.info("slot cleared", extra={"extra_fields": {"generation": 3}})
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import MutableMapping
from datetime import datetime, timezone
from typing import Any

_RESERVED_KEYS: frozenset[str] = frozenset({"ts", "level", "logger", "message"})


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts``, ``level``, ``logger`` and ``message``.
    Fields passed as ``extra={"extra_fields": {...}}`` are merged into the
    top-level object, a field named like a guaranteed key is written as
    ``field_<name>``; ``exception`` and ``stack_info`` are added when
    present on the record.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            for key, value in extra_fields.items():
                # Guaranteed keys are never overwritten.
                log_entry[f"field_{key}" if key in _RESERVED_KEYS else key] = value

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name, so repeated ``get_logger`` calls are cheap
# and never stack handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "mediadesk",
    *,
    level: int | str = logging.DEBUG,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"mediadesk"``.
    level:
        Minimum log level, as an ``int`` or a case-insensitive name.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a :class:`StructuredFormatter` handler attached.
        Repeated calls with the same *name* return the same logger and do
        not add duplicate handlers.
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


class BoundLogger(logging.LoggerAdapter):
    """Logger adapter that adds fixed fields to every record.

    Per-call ``extra_fields`` are merged over the bound ones.

    Usage::

        ulog = bind_fields(log, target="inline", generation=2)
        ulog.info("Upload succeeded", extra={"extra_fields": {"bytes": 512}})
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        fields = dict(self.extra or {})
        fields.update(extra.get("extra_fields") or {})
        extra["extra_fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs


def bind_fields(logger: logging.Logger, **fields: Any) -> BoundLogger:
    """Return *logger* wrapped so every record carries *fields*."""
    return BoundLogger(logger, fields)
