"""Notification sink collaborator.

The intake pipeline reports each finished upload exactly once through a
:class:`NotificationSink`.  Delivery is fire-and-forget: no return value
is consumed, and a failing sink never turns a finished upload into an
error.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from mediadesk.models import Notification, NotificationKind
from mediadesk.observability import get_logger

log = get_logger("mediadesk.notify")


@runtime_checkable
class NotificationSink(Protocol):
    """Anything that can surface a message to the user."""

    def notify(self, notification: Notification) -> None:
        ...


class LoggingNotificationSink:
    """Write notifications to a structured logger.

    Used when the host provides no toast surface of its own.  Failures are
    logged at ``WARNING``, successes at ``INFO``.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or log

    def notify(self, notification: Notification) -> None:
        level = (
            logging.WARNING
            if notification.kind == NotificationKind.FAILURE
            else logging.INFO
        )
        self._log.log(
            level,
            notification.title,
            extra={
                "extra_fields": {
                    "kind": notification.kind.value,
                    "detail": notification.detail,
                }
            },
        )


def deliver(sink: NotificationSink, notification: Notification) -> None:
    """Hand *notification* to *sink* without letting the sink fail the caller."""
    try:
        sink.notify(notification)
    except Exception:
        log.exception(
            "Notification sink raised",
            extra={"extra_fields": {"title": notification.title}},
        )
