"""Observability: structured logging and metrics hooks for mediadesk."""

from __future__ import annotations

from .logger import BoundLogger, StructuredFormatter, bind_fields, get_logger
from .metrics import MetricsHook, NoopMetricsHook

__all__ = [
    "BoundLogger",
    "MetricsHook",
    "NoopMetricsHook",
    "StructuredFormatter",
    "bind_fields",
    "get_logger",
]
