"""Drag-and-drop zone around the featured image."""

from __future__ import annotations

from collections.abc import Iterable

from mediadesk.image import filter_images
from mediadesk.models import ImageFile, UploadOutcome, UploadSuccess, UploadTarget
from mediadesk.observability import get_logger
from mediadesk.upload import UploadCoordinator

from .featured import FeaturedImageSlot

log = get_logger("mediadesk.editor.dropzone")


class DragDropZone:
    """Accept dropped files and route the first image to the featured slot.

    Policy, kept exactly as authors expect it:

    * Only ``image/*`` payloads count.  Nothing else is uploaded.
    * Only the first image is uploaded; the rest of the drop is ignored.
    * The result fills the featured slot only if the slot is still empty
      when the upload finishes.  A picker choice made in the meantime wins.
    """

    def __init__(
        self,
        coordinator: UploadCoordinator,
        slot: FeaturedImageSlot,
    ) -> None:
        self._coordinator = coordinator
        self._slot = slot
        self.drag_over = False

    def drag_enter(self) -> None:
        self.drag_over = True

    def drag_leave(self) -> None:
        self.drag_over = False

    async def handle_drop(self, files: Iterable[ImageFile]) -> UploadOutcome | None:
        """Handle a drop.

        Returns ``None`` when the drop held no image; otherwise the outcome
        of uploading the first image.
        """
        self.drag_over = False
        dropped = list(files)
        images = filter_images(dropped)
        if not images:
            self._coordinator.metrics.increment("mediadesk.drops_ignored_total")
            log.debug(
                "Drop contained no images",
                extra={"extra_fields": {"dropped": len(dropped)}},
            )
            return None
        if len(images) > 1:
            log.debug(
                "Ignoring extra dropped images",
                extra={"extra_fields": {"ignored": len(images) - 1}},
            )

        request = self._coordinator.new_request(images[0], UploadTarget.DROPPED)
        outcome = await self._coordinator.upload(request)
        if isinstance(outcome, UploadSuccess) and self._coordinator.is_current(request):
            if not self._slot.set_if_empty(outcome.url):
                log.info(
                    "Featured image already set; dropped image not applied",
                    extra={"extra_fields": {"url": outcome.url}},
                )
        return outcome
