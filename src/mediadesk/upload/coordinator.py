"""Upload coordinator: the single choke point for every image upload.

Every entry point (featured picker, drop zone, inline embed) builds an
:class:`~mediadesk.models.UploadRequest`, awaits
:meth:`UploadCoordinator.upload`, and reconciles the returned outcome
against its own target.  The coordinator never picks the target.

Side effects of one call, in order:

1. ``last_error`` is cleared, the in-flight counter goes up and
   ``uploading`` becomes ``True``.
2. The blob store is called; any error it raises becomes an
   :class:`~mediadesk.models.UploadFailure` and, unless the draft was reset
   meanwhile, is mirrored into ``last_error``.
3. Exactly one notification is delivered.
4. In a ``finally`` block the counter goes down and ``uploading`` is set
   to whether any other upload is still running.
"""

from __future__ import annotations

import time
import weakref
from collections.abc import Callable

from mediadesk.config import MediaDeskConfig
from mediadesk.errors import MediaDeskUploadTransportError
from mediadesk.image import UploadStateMachine, generate_storage_key
from mediadesk.models import (
    EditorDraftState,
    ImageFile,
    Notification,
    NotificationKind,
    UploadFailure,
    UploadOutcome,
    UploadRequest,
    UploadState,
    UploadSuccess,
    UploadTarget,
)
from mediadesk.notify import NotificationSink, deliver
from mediadesk.observability import MetricsHook, NoopMetricsHook, bind_fields, get_logger
from mediadesk.storage import BlobStore

log = get_logger("mediadesk.upload")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

async def store_and_resolve(
    store: BlobStore,
    bucket: str,
    key: str,
    file: ImageFile,
    *,
    upsert: bool = False,
) -> str:
    """Store *file* under *key* and return its public URL.

    Any exception raised by the store is re-raised as a
    :class:`MediaDeskUploadTransportError`, so callers handle a single
    error type.
    """
    try:
        path = await store.store_object(
            bucket,
            key,
            file.data,
            content_type=file.content_type,
            upsert=upsert,
        )
        return store.public_url_for(bucket, path)
    except MediaDeskUploadTransportError:
        raise
    except Exception as exc:
        raise MediaDeskUploadTransportError(
            message=str(exc) or type(exc).__name__,
            context={"bucket": bucket, "key": key},
            cause=exc,
        ) from exc


def success_notification(detail: str = "Image added to post.") -> Notification:
    return Notification(NotificationKind.SUCCESS, "Image uploaded!", detail)


def failure_notification(message: str) -> Notification:
    return Notification(NotificationKind.FAILURE, "Upload failed", message)


# ---------------------------------------------------------------------------
# Coordinator
# ---------------------------------------------------------------------------

class UploadCoordinator:
    """Run uploads for one authoring session.

    Parameters
    ----------
    store:
        The blob store collaborator.
    state:
        The session's draft state.  The coordinator writes only its
        ``uploading`` and ``last_error`` fields.
    notifier:
        Where success and failure messages go.
    config:
        Shared configuration (bucket name, key suffix length, metrics).
    clock_ms:
        Returns the current Unix time in milliseconds.  Override in tests.
    suffix_factory:
        Returns the random key suffix.  Override in tests.
    """

    def __init__(
        self,
        store: BlobStore,
        state: EditorDraftState,
        notifier: NotificationSink,
        config: MediaDeskConfig | None = None,
        *,
        clock_ms: Callable[[], int] | None = None,
        suffix_factory: Callable[[], str] | None = None,
    ) -> None:
        self._store = store
        self._state = state
        self._notifier = notifier
        self._config = config or MediaDeskConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )
        self._clock_ms = clock_ms
        self._suffix_factory = suffix_factory
        self._in_flight = 0
        self._machines: weakref.WeakKeyDictionary[UploadRequest, UploadStateMachine] = (
            weakref.WeakKeyDictionary()
        )

    @property
    def state(self) -> EditorDraftState:
        return self._state

    @property
    def metrics(self) -> MetricsHook:
        return self._metrics

    @property
    def in_flight(self) -> int:
        """Number of uploads currently awaiting the store."""
        return self._in_flight

    # ------------------------------------------------------------------
    # Requests and generations
    # ------------------------------------------------------------------

    def new_request(self, file: ImageFile, target: UploadTarget) -> UploadRequest:
        """Build a request stamped with the live session generation."""
        return UploadRequest(file=file, target=target, generation=self._state.generation)

    def is_current(self, request: UploadRequest) -> bool:
        """Return ``True`` if *request* belongs to the live session.

        Outcomes of requests issued before the last reset must not be
        reconciled.  A stale request is counted and logged here so every
        entry point reports it the same way.
        """
        if request.generation == self._state.generation:
            return True
        self._metrics.increment(
            "mediadesk.stale_outcomes_total", tags={"target": request.target.value}
        )
        log.info(
            "Discarding outcome from a previous session",
            extra={
                "extra_fields": {
                    "target": request.target.value,
                    "request_generation": request.generation,
                    "live_generation": self._state.generation,
                }
            },
        )
        return False

    def storage_key(self, file: ImageFile) -> str:
        now_ms = self._clock_ms() if self._clock_ms is not None else None
        suffix = self._suffix_factory() if self._suffix_factory is not None else None
        return generate_storage_key(
            file.name,
            file.content_type,
            suffix_length=self._config.key_suffix_length,
            now_ms=now_ms,
            suffix=suffix,
        )

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------

    async def upload(self, request: UploadRequest) -> UploadOutcome:
        """Upload ``request.file`` and return the outcome.

        Store failures never propagate; they are returned as
        :class:`UploadFailure`.  Task cancellation does propagate, and the
        ``uploading`` flag is still reset.

        A stale failure (the draft was reset meanwhile) is counted and
        logged like any stale outcome and does not touch ``last_error``.

        Raises
        ------
        ValueError
            If *request* was already dispatched.  Each request uploads at
            most once; build a new one to retry.
        """
        bucket = self._config.post_images_bucket
        machine = self._machine_for(request)
        key = machine.request_id
        tags = {"target": request.target.value}
        ulog = bind_fields(
            log, target=request.target.value, generation=request.generation, key=key
        )

        self._begin(machine)
        t0 = time.monotonic()
        try:
            try:
                url = await store_and_resolve(self._store, bucket, key, request.file)
            except MediaDeskUploadTransportError as exc:
                machine.transition(UploadState.FAILED)
                outcome: UploadOutcome = UploadFailure(message=exc.message)
                if self.is_current(request):
                    self._state.last_error = exc.message
                self._metrics.increment("mediadesk.upload_failure_total", tags=tags)
                ulog.warning(
                    "Upload failed",
                    extra={
                        "extra_fields": {
                            "code": str(getattr(exc.code, "value", exc.code)),
                            "error": exc.message,
                        }
                    },
                )
                deliver(self._notifier, failure_notification(exc.message))
            else:
                machine.transition(UploadState.SUCCEEDED)
                outcome = UploadSuccess(url=url)
                self._metrics.increment("mediadesk.upload_success_total", tags=tags)
                ulog.info(
                    "Upload succeeded",
                    extra={"extra_fields": {"bytes": request.file.size}},
                )
                deliver(self._notifier, success_notification())
            machine.transition(UploadState.IDLE)
            return outcome
        finally:
            self._metrics.timing(
                "mediadesk.upload_duration_ms", (time.monotonic() - t0) * 1000, tags=tags
            )
            self._end()

    def _machine_for(self, request: UploadRequest) -> UploadStateMachine:
        """Return the machine tracking *request*, creating it on first use.

        The key is generated once per request, so a re-dispatched request
        reaches its existing machine and is refused there.
        """
        machine = self._machines.get(request)
        if machine is None:
            machine = UploadStateMachine(self.storage_key(request.file))
            self._machines[request] = machine
        return machine

    def _begin(self, machine: UploadStateMachine) -> None:
        machine.transition(UploadState.UPLOADING)
        self._state.last_error = None
        self._in_flight += 1
        self._state.uploading = True
        self._metrics.gauge("mediadesk.uploads_in_flight", self._in_flight)

    def _end(self) -> None:
        self._in_flight -= 1
        self._state.uploading = self._in_flight > 0
        self._metrics.gauge("mediadesk.uploads_in_flight", self._in_flight)
