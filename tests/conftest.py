"""Shared test fixtures for the mediadesk test suite."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from mediadesk.config import MediaDeskConfig
from mediadesk.models import EditorDraftState, ImageFile, Notification
from mediadesk.upload import UploadCoordinator

# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeBlobStore:
    """In-memory blob store whose calls can be held open or made to fail.

    Calls are matched on the uploaded bytes, so each test file should carry
    distinct ``data``.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._gates: dict[bytes, asyncio.Event] = {}
        self._errors: dict[bytes, BaseException] = {}

    def hold(self, data: bytes) -> asyncio.Event:
        """Block uploads of *data* until the returned event is set."""
        gate = asyncio.Event()
        self._gates[data] = gate
        return gate

    def fail(self, data: bytes, error: BaseException) -> None:
        self._errors[data] = error

    async def store_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str = "application/octet-stream",
        upsert: bool = False,
    ) -> str:
        self.calls.append(
            {
                "bucket": bucket,
                "key": key,
                "data": data,
                "content_type": content_type,
                "upsert": upsert,
            }
        )
        gate = self._gates.get(data)
        if gate is not None:
            await gate.wait()
        error = self._errors.get(data)
        if error is not None:
            raise error
        return key

    def public_url_for(self, bucket: str, path: str) -> str:
        return f"https://cdn.test/{bucket}/{path}"


class RecordingNotifier:
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(self, name: str, value: int = 1, tags: dict[str, str] | None = None) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(self, name: str, ms: float, tags: dict[str, str] | None = None) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(self, name: str, value: float, tags: dict[str, str] | None = None) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})

    def names(self) -> list[str]:
        return [c["name"] for c in self.increments]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()


@pytest.fixture
def config(metrics: RecordingMetricsHook) -> MediaDeskConfig:
    """Default test configuration with a dummy key and recording metrics."""
    return MediaDeskConfig(
        api_key="test-key-1234",
        storage_url="https://storage.test/storage/v1",
        metrics=metrics,
    )


@pytest.fixture
def store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def state() -> EditorDraftState:
    return EditorDraftState()


@pytest.fixture
def coordinator(
    store: FakeBlobStore,
    state: EditorDraftState,
    notifier: RecordingNotifier,
    config: MediaDeskConfig,
) -> UploadCoordinator:
    """Coordinator with a fixed clock and sequential suffixes."""
    counter = iter(range(1_000_000))
    return UploadCoordinator(
        store,
        state,
        notifier,
        config,
        clock_ms=lambda: 1_700_000_000_000,
        suffix_factory=lambda: f"sfx{next(counter):07d}",
    )


@pytest.fixture
def make_image():
    """Factory for small in-memory image files with distinct payloads."""

    def _make(name: str = "photo.png", content_type: str = "image/png", data: bytes | None = None) -> ImageFile:
        return ImageFile(name=name, content_type=content_type, data=data or name.encode())

    return _make
