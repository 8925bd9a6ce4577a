"""Tests for notification sinks."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

from mediadesk.models import Notification, NotificationKind
from mediadesk.notify import LoggingNotificationSink, NotificationSink, deliver


class TestLoggingNotificationSink:
    def test_satisfies_protocol(self):
        assert isinstance(LoggingNotificationSink(), NotificationSink)

    def test_success_logged_at_info(self):
        logger = MagicMock(spec=logging.Logger)
        LoggingNotificationSink(logger).notify(
            Notification(NotificationKind.SUCCESS, "Image uploaded!", "Image added to post.")
        )
        level, title = logger.log.call_args.args
        assert level == logging.INFO
        assert title == "Image uploaded!"
        assert logger.log.call_args.kwargs["extra"]["extra_fields"] == {
            "kind": "success",
            "detail": "Image added to post.",
        }

    def test_failure_logged_at_warning(self):
        logger = MagicMock(spec=logging.Logger)
        LoggingNotificationSink(logger).notify(
            Notification(NotificationKind.FAILURE, "Upload failed", "quota")
        )
        assert logger.log.call_args.args[0] == logging.WARNING


class TestDeliver:
    def test_passes_notification(self):
        sink = MagicMock()
        note = Notification(NotificationKind.SUCCESS, "ok")
        deliver(sink, note)
        sink.notify.assert_called_once_with(note)

    def test_swallows_sink_errors(self):
        sink = MagicMock()
        sink.notify.side_effect = RuntimeError("ui gone")
        deliver(sink, Notification(NotificationKind.FAILURE, "Upload failed"))
        sink.notify.assert_called_once()
