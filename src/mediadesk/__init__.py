"""mediadesk: image intake and embedding for rich-text authoring surfaces.

Public re-exports
-----------------

* **Surface:** :class:`AuthoringSurface` and its components
* **Uploads:** :class:`UploadCoordinator`, :class:`AvatarUploader`
* **Storage:** :class:`BlobStore`, :class:`HttpBlobStore`
* **Configuration:** :class:`MediaDeskConfig`
* **Errors:** Every :class:`MediaDeskError` subclass and :class:`ErrorCode`
* **Models:** Requests, outcomes, enums and draft state

Usage::

    import asyncio
    from mediadesk import AuthoringSurface, HttpBlobStore, ImageFile, MediaDeskConfig

    async def main():
        config = MediaDeskConfig(
            api_key="service-key",
            storage_url="https://project.supabase.co/storage/v1",
        )
        async with HttpBlobStore(config) as store:
            surface = AuthoringSurface(store, config=config)
            await surface.picker.upload(ImageFile.from_path("cover.png"))
            print(surface.state.featured_image_url)

    asyncio.run(main())
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from mediadesk.config import (
    DEFAULT_AVATARS_BUCKET,
    DEFAULT_POST_IMAGES_BUCKET,
    MediaDeskConfig,
)

# ── Surface ─────────────────────────────────────────────────────────────
from mediadesk.editor import (
    AuthoringSurface,
    CursorCapture,
    DeltaDocument,
    DragDropZone,
    FeaturedImagePicker,
    FeaturedImageSlot,
    FileSelector,
    InlineEmbedTrigger,
    QueuedFileSelector,
    RichTextEditor,
)

# ── Errors ──────────────────────────────────────────────────────────────
from mediadesk.errors import (
    ErrorCode,
    MediaDeskAuthError,
    MediaDeskConflictError,
    MediaDeskCursorError,
    MediaDeskError,
    MediaDeskNetworkError,
    MediaDeskNotFoundError,
    MediaDeskPermissionError,
    MediaDeskSelectionError,
    MediaDeskUploadTransportError,
)

# ── Models ──────────────────────────────────────────────────────────────
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
from mediadesk.notify import LoggingNotificationSink, NotificationSink

# ── Storage ─────────────────────────────────────────────────────────────
from mediadesk.storage import BlobStore, HttpBlobStore

# ── Uploads ─────────────────────────────────────────────────────────────
from mediadesk.upload import AvatarUploader, UploadCoordinator

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Surface
    "AuthoringSurface",
    "CursorCapture",
    "DeltaDocument",
    "DragDropZone",
    "FeaturedImagePicker",
    "FeaturedImageSlot",
    "FileSelector",
    "InlineEmbedTrigger",
    "QueuedFileSelector",
    "RichTextEditor",
    # Uploads
    "UploadCoordinator",
    "AvatarUploader",
    # Storage
    "BlobStore",
    "HttpBlobStore",
    # Notifications
    "NotificationSink",
    "LoggingNotificationSink",
    # Configuration
    "MediaDeskConfig",
    "DEFAULT_POST_IMAGES_BUCKET",
    "DEFAULT_AVATARS_BUCKET",
    # Errors
    "MediaDeskError",
    "ErrorCode",
    "MediaDeskUploadTransportError",
    "MediaDeskAuthError",
    "MediaDeskPermissionError",
    "MediaDeskNotFoundError",
    "MediaDeskConflictError",
    "MediaDeskNetworkError",
    "MediaDeskSelectionError",
    "MediaDeskCursorError",
    # Models
    "ImageFile",
    "UploadRequest",
    "UploadTarget",
    "UploadState",
    "UploadOutcome",
    "UploadSuccess",
    "UploadFailure",
    "Notification",
    "NotificationKind",
    "EditorDraftState",
]
