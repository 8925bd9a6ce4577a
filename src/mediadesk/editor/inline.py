"""Toolbar "insert image" action."""

from __future__ import annotations

from collections.abc import Callable

from mediadesk.models import ImageFile, UploadOutcome, UploadSuccess, UploadTarget
from mediadesk.observability import get_logger
from mediadesk.upload import UploadCoordinator

from .cursor import CursorCapture
from .document import RichTextEditor
from .selection import FileSelector

log = get_logger("mediadesk.editor.inline")


class InlineEmbedTrigger:
    """Upload an image and embed it where the cursor was when it started.

    Parameters
    ----------
    coordinator:
        Shared upload coordinator.
    editor:
        The rich-text engine receiving the embed.
    selector:
        File selection component opened by :meth:`trigger`.
    on_content_change:
        Called with ``editor.serialize()`` after a successful insertion.
    accept:
        Filter passed to the selector.
    """

    def __init__(
        self,
        coordinator: UploadCoordinator,
        editor: RichTextEditor,
        selector: FileSelector,
        on_content_change: Callable[[str], None] | None = None,
        accept: str = "image/*",
    ) -> None:
        self._coordinator = coordinator
        self._editor = editor
        self._selector = selector
        self._on_content_change = on_content_change
        self._accept = accept

    async def trigger(self) -> UploadOutcome | None:
        """Open the selector; embed the chosen file.  ``None`` if cancelled."""
        file = await self._selector.select(self._accept)
        if file is None:
            return None
        return await self.embed(file)

    async def embed(self, file: ImageFile) -> UploadOutcome:
        """Capture the cursor, upload *file*, and insert it at the capture.

        The cursor is captured before the upload is dispatched.  On failure
        the capture is dropped and the document is left as it was.
        """
        capture = CursorCapture.take(self._editor)
        request = self._coordinator.new_request(file, UploadTarget.INLINE)
        outcome = await self._coordinator.upload(request)

        if not isinstance(outcome, UploadSuccess) or not self._coordinator.is_current(request):
            capture.discard()
            return outcome

        index = capture.consume()
        self._editor.insert_embed(index, outcome.url)
        log.debug(
            "Inline image embedded",
            extra={"extra_fields": {"index": index, "url": outcome.url}},
        )
        if self._on_content_change is not None:
            self._on_content_change(self._editor.serialize())
        return outcome
