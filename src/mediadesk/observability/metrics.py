"""Metrics hook protocol and no-op default implementation.

mediadesk emits counters, timings and gauges around every upload.  By
default a :class:`NoopMetricsHook` is used; pass any object satisfying
:class:`MetricsHook` as ``MediaDeskConfig(metrics=...)`` to forward them
to StatsD, Prometheus or similar.

Emitted metric names:

* ``mediadesk.requests_total``          -- counter, per storage request
* ``mediadesk.upload_success_total``    -- counter
* ``mediadesk.upload_failure_total``    -- counter
* ``mediadesk.upload_duration_ms``      -- timing
* ``mediadesk.uploads_in_flight``       -- gauge
* ``mediadesk.drops_ignored_total``     -- counter
* ``mediadesk.stale_outcomes_total``    -- counter
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict of string keys and values.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Default metrics implementation that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
