"""Featured-image slot and its explicit picker.

The slot is the one target two entry points can write: the picker always
overwrites it, while the drop zone only fills it when empty (see
:mod:`mediadesk.editor.dropzone`).
"""

from __future__ import annotations

from mediadesk.models import (
    EditorDraftState,
    ImageFile,
    UploadOutcome,
    UploadSuccess,
    UploadTarget,
)
from mediadesk.observability import get_logger
from mediadesk.upload import UploadCoordinator

from .selection import FileSelector

log = get_logger("mediadesk.editor.featured")


class FeaturedImageSlot:
    """Holds at most one cover-image URL in the draft state."""

    def __init__(self, state: EditorDraftState) -> None:
        self._state = state

    @property
    def url(self) -> str | None:
        return self._state.featured_image_url

    @property
    def is_empty(self) -> bool:
        return not self._state.featured_image_url

    def set(self, url: str) -> None:
        """Store *url*, replacing any current image.

        Raises
        ------
        ValueError
            If *url* is empty.
        """
        if not isinstance(url, str) or not url:
            raise ValueError("featured image URL must be a non-empty string")
        self._state.featured_image_url = url

    def set_if_empty(self, url: str) -> bool:
        """Store *url* only if the slot is empty.  Returns whether it did.

        This is a plain check-then-act with no atomic guard.  It is only
        safe because every caller runs on the same event loop and nothing
        awaits between the check and the write.
        """
        if not self.is_empty:
            return False
        self.set(url)
        return True

    def clear(self) -> None:
        self._state.featured_image_url = None


class FeaturedImagePicker:
    """The "Choose Image" button next to the featured slot."""

    def __init__(
        self,
        coordinator: UploadCoordinator,
        slot: FeaturedImageSlot,
        selector: FileSelector,
        accept: str = "image/*",
    ) -> None:
        self._coordinator = coordinator
        self._slot = slot
        self._selector = selector
        self._accept = accept

    @property
    def disabled(self) -> bool:
        """The picker is greyed out while any upload is running."""
        return self._coordinator.state.uploading

    async def pick(self) -> UploadOutcome | None:
        """Ask the selector for a file and upload it.

        Returns ``None`` when the author closes the dialog without
        choosing anything.
        """
        file = await self._selector.select(self._accept)
        if file is None:
            return None
        return await self.upload(file)

    async def upload(self, file: ImageFile) -> UploadOutcome:
        """Upload *file* and, on success, always overwrite the slot."""
        request = self._coordinator.new_request(file, UploadTarget.FEATURED)
        outcome = await self._coordinator.upload(request)
        if isinstance(outcome, UploadSuccess) and self._coordinator.is_current(request):
            self._slot.set(outcome.url)
            log.debug("Featured image set", extra={"extra_fields": {"url": outcome.url}})
        return outcome
