"""Captured cursor positions for inline embeds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mediadesk.errors import MediaDeskCursorError

if TYPE_CHECKING:
    from .document import RichTextEditor


class CursorCapture:
    """A cursor position frozen at the moment an inline upload begins.

    The position is read once, synchronously, before the upload is
    dispatched.  It is never re-read from the editor afterwards, even if
    the author keeps typing while the upload is pending.  The token must be
    consumed (or discarded) exactly once.
    """

    __slots__ = ("_index", "_spent")

    def __init__(self, index: int) -> None:
        if index < 0:
            raise ValueError(f"cursor index must be >= 0, got {index}")
        self._index = index
        self._spent = False

    @classmethod
    def take(cls, editor: RichTextEditor) -> CursorCapture:
        """Capture *editor*'s selection, or index 0 when nothing is selected."""
        selection = editor.get_selection()
        return cls(selection if selection is not None else 0)

    @property
    def spent(self) -> bool:
        return self._spent

    def consume(self) -> int:
        """Return the captured index and mark the token spent.

        Raises
        ------
        MediaDeskCursorError
            If the token was already consumed or discarded.
        """
        if self._spent:
            raise MediaDeskCursorError(
                message="Cursor capture has already been used",
                context={"index": self._index},
            )
        self._spent = True
        return self._index

    def discard(self) -> None:
        """Drop the capture without inserting anything."""
        self._spent = True

    def __repr__(self) -> str:
        return f"CursorCapture(index={self._index}, spent={self._spent})"
