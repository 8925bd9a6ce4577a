"""Profile avatar uploads.

Avatars share the blob-store contract and failure handling of post images
but live in their own bucket, use a deterministic per-user key, and
overwrite the previous object.  They never touch an authoring session's
draft state.
"""

from __future__ import annotations

from mediadesk.config import MediaDeskConfig
from mediadesk.errors import MediaDeskUploadTransportError
from mediadesk.image import avatar_storage_key
from mediadesk.models import (
    ImageFile,
    Notification,
    NotificationKind,
    UploadFailure,
    UploadOutcome,
    UploadSuccess,
)
from mediadesk.notify import NotificationSink, deliver
from mediadesk.observability import NoopMetricsHook, get_logger
from mediadesk.storage import BlobStore

from .coordinator import failure_notification, store_and_resolve

log = get_logger("mediadesk.upload.avatar")


class AvatarUploader:
    """Upload a user's avatar to the avatars bucket."""

    def __init__(
        self,
        store: BlobStore,
        notifier: NotificationSink,
        config: MediaDeskConfig | None = None,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._config = config or MediaDeskConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    async def upload_avatar(self, user_id: str, file: ImageFile) -> UploadOutcome:
        """Store *file* as ``{user_id}.{ext}`` with upsert and return the outcome.

        Raises
        ------
        ValueError
            If *user_id* is empty.
        """
        key = avatar_storage_key(user_id, file.name, file.content_type)
        tags = {"target": "avatar"}
        try:
            url = await store_and_resolve(
                self._store, self._config.avatars_bucket, key, file, upsert=True
            )
        except MediaDeskUploadTransportError as exc:
            self._metrics.increment("mediadesk.upload_failure_total", tags=tags)
            log.warning(
                "Avatar upload failed",
                extra={"extra_fields": {"user_id": user_id, "error": exc.message}},
            )
            deliver(self._notifier, failure_notification(exc.message))
            return UploadFailure(message=exc.message)

        self._metrics.increment("mediadesk.upload_success_total", tags=tags)
        log.info("Avatar uploaded", extra={"extra_fields": {"user_id": user_id, "key": key}})
        deliver(
            self._notifier,
            Notification(NotificationKind.SUCCESS, "Avatar updated", "Your new avatar is live."),
        )
        return UploadSuccess(url=url)
