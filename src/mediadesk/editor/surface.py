"""The authoring surface: one draft plus every image entry point.

:class:`AuthoringSurface` owns an :class:`~mediadesk.models.EditorDraftState`
and builds the slot, picker, drop zone and inline trigger around a single
:class:`~mediadesk.upload.UploadCoordinator`, so all three entry points
share one ``uploading`` flag and one featured slot.

Usage::

    store = HttpBlobStore(config)
    surface = AuthoringSurface(store, config=config)

    surface.set_title("Spring notes")
    await surface.drop_zone.handle_drop([ImageFile("cover.jpg", "image/jpeg", data)])
    surface.state.featured_image_url
"""

from __future__ import annotations

from typing import Any

from mediadesk.config import MediaDeskConfig
from mediadesk.models import EditorDraftState
from mediadesk.notify import LoggingNotificationSink, NotificationSink
from mediadesk.observability import get_logger
from mediadesk.storage import BlobStore
from mediadesk.upload import UploadCoordinator

from .document import DeltaDocument, RichTextEditor
from .dropzone import DragDropZone
from .featured import FeaturedImagePicker, FeaturedImageSlot
from .inline import InlineEmbedTrigger
from .selection import FileSelector, QueuedFileSelector

log = get_logger("mediadesk.editor.surface")


class AuthoringSurface:
    """Wire the intake pipeline around one draft.

    Parameters
    ----------
    store:
        Blob store used for every upload.
    config:
        Shared configuration.  Defaults to ``MediaDeskConfig()``.
    notifier:
        Notification sink.  Defaults to :class:`LoggingNotificationSink`.
    editor:
        Rich-text engine.  Defaults to an empty :class:`DeltaDocument`.
    selector:
        File selection component shared by the picker and the inline
        trigger.  Defaults to a :class:`QueuedFileSelector`.
    **coordinator_kwargs:
        Forwarded to :class:`UploadCoordinator` (``clock_ms``,
        ``suffix_factory``).
    """

    def __init__(
        self,
        store: BlobStore,
        *,
        config: MediaDeskConfig | None = None,
        notifier: NotificationSink | None = None,
        editor: RichTextEditor | None = None,
        selector: FileSelector | None = None,
        **coordinator_kwargs: Any,
    ) -> None:
        self.config = config or MediaDeskConfig()
        self.state = EditorDraftState()
        self.editor: RichTextEditor = editor if editor is not None else DeltaDocument()
        self.selector: FileSelector = selector if selector is not None else QueuedFileSelector()
        self.notifier: NotificationSink = notifier or LoggingNotificationSink()

        self.coordinator = UploadCoordinator(
            store, self.state, self.notifier, self.config, **coordinator_kwargs
        )
        self.slot = FeaturedImageSlot(self.state)
        self.picker = FeaturedImagePicker(
            self.coordinator, self.slot, self.selector, accept=self.config.accept
        )
        self.drop_zone = DragDropZone(self.coordinator, self.slot)
        self.inline = InlineEmbedTrigger(
            self.coordinator,
            self.editor,
            self.selector,
            on_content_change=self.set_content,
            accept=self.config.accept,
        )

    # ------------------------------------------------------------------
    # Plain setters
    # ------------------------------------------------------------------

    def set_title(self, title: str) -> None:
        self.state.title = title

    def set_content(self, content: str) -> None:
        self.state.content = content

    def set_excerpt(self, excerpt: str) -> None:
        self.state.excerpt = excerpt

    def remove_featured_image(self) -> None:
        self.slot.clear()

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Start a fresh draft.

        Every field is cleared and the generation is bumped, so uploads
        still in flight finish without touching the new draft.  The
        ``uploading`` flag keeps tracking them until they settle.
        """
        generation = self.state.generation + 1
        self.state.title = ""
        self.state.content = ""
        self.state.excerpt = ""
        self.state.featured_image_url = None
        self.state.last_error = None
        self.state.generation = generation
        if isinstance(self.editor, DeltaDocument):
            self.editor.clear()
        log.info(
            "Draft reset",
            extra={
                "extra_fields": {
                    "generation": generation,
                    "in_flight": self.coordinator.in_flight,
                }
            },
        )

    def to_post(self) -> dict[str, Any]:
        """Return the fields an external save action persists."""
        return {
            "title": self.state.title,
            "content": self.state.content,
            "excerpt": self.state.excerpt,
            "featured_image": self.state.featured_image_url,
        }
