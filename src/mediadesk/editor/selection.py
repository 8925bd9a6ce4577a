"""Reusable file-selection component.

Both the featured-image picker and the inline embed action ask a
:class:`FileSelector` for one file.  :class:`QueuedFileSelector` is a
long-lived component: each :meth:`~QueuedFileSelector.select` call opens
one selection, and the host answers it with :meth:`offer` or
:meth:`cancel`.  The pending waiter is released when the call returns, so
nothing from one selection survives into the next.
"""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from mediadesk.errors import MediaDeskSelectionError
from mediadesk.models import ImageFile
from mediadesk.observability import get_logger

log = get_logger("mediadesk.editor.selection")


@runtime_checkable
class FileSelector(Protocol):
    """Something that lets the author pick one file."""

    async def select(self, accept: str = "image/*") -> ImageFile | None:
        """Wait for the author's choice.  ``None`` means the dialog was closed."""
        ...


class QueuedFileSelector:
    """A :class:`FileSelector` answered programmatically by the host UI."""

    def __init__(self) -> None:
        self._pending: asyncio.Future[ImageFile | None] | None = None
        self._accept: str | None = None

    @property
    def is_open(self) -> bool:
        return self._pending is not None

    @property
    def accept(self) -> str | None:
        """The filter of the open selection, for the host to display."""
        return self._accept

    async def select(self, accept: str = "image/*") -> ImageFile | None:
        """Open a selection and wait until the host answers it.

        Raises
        ------
        MediaDeskSelectionError
            If another selection is still open.
        """
        if self._pending is not None:
            raise MediaDeskSelectionError(
                message="A file selection is already open",
                context={"accept": accept},
            )
        self._pending = asyncio.get_running_loop().create_future()
        self._accept = accept
        try:
            return await self._pending
        finally:
            self._pending = None
            self._accept = None

    def offer(self, file: ImageFile) -> bool:
        """Answer the open selection with *file*.

        Returns ``False`` when no selection is waiting.
        """
        return self._resolve(file)

    def cancel(self) -> bool:
        """Answer the open selection with "no file".  Returns ``False`` when
        no selection is waiting.
        """
        return self._resolve(None)

    def _resolve(self, file: ImageFile | None) -> bool:
        pending = self._pending
        if pending is None or pending.done():
            log.debug(
                "No open selection to answer",
                extra={"extra_fields": {"cancelled": file is None}},
            )
            return False
        pending.set_result(file)
        return True
