"""Shared utilities for mediadesk."""

from .redact import redact

__all__ = ["redact"]
