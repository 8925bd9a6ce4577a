"""Rich-text editor collaborator.

:class:`RichTextEditor` is the slice of a rich-text engine the inline
embed path needs.  Positions count characters and embeds alike, one unit
each, so an image occupies a single index.

:class:`DeltaDocument` is a small in-memory engine used when the host does
not plug in its own.  It serialises to HTML paragraphs.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class RichTextEditor(Protocol):
    """Cursor access and image embedding on a rich document."""

    def get_selection(self) -> int | None:
        """Current cursor index, or ``None`` when the editor is unfocused."""
        ...

    def insert_embed(self, index: int, url: str) -> None:
        """Insert an image embed pointing at *url* at *index*."""
        ...

    def serialize(self) -> str:
        """Return the document's stored form."""
        ...


@dataclass(frozen=True)
class ImageEmbed:
    url: str


_Item = Union[str, ImageEmbed]


class DeltaDocument:
    """Minimal rich document of characters and image embeds.

    Parameters
    ----------
    text:
        Initial plain-text content.
    """

    def __init__(self, text: str = "") -> None:
        self._items: list[_Item] = list(text)
        self._selection: int | None = None

    def __len__(self) -> int:
        return len(self._items)

    # -- selection ---------------------------------------------------------

    def get_selection(self) -> int | None:
        return self._selection

    def set_selection(self, index: int | None) -> None:
        """Move the cursor, clamped to the document bounds.  ``None`` blurs."""
        self._selection = None if index is None else self._clamp(index)

    # -- editing -----------------------------------------------------------

    def insert_text(self, index: int, text: str) -> None:
        index = self._clamp(index)
        self._items[index:index] = list(text)
        self._shift_selection(index, len(text))

    def insert_embed(self, index: int, url: str) -> None:
        index = self._clamp(index)
        self._items.insert(index, ImageEmbed(url))
        self._shift_selection(index, 1)

    def delete(self, index: int, length: int) -> None:
        index = self._clamp(index)
        end = self._clamp(index + max(length, 0))
        del self._items[index:end]
        if self._selection is not None and self._selection > index:
            self._selection = max(index, self._selection - (end - index))

    def clear(self) -> None:
        self._items.clear()
        self._selection = None

    # -- inspection --------------------------------------------------------

    def embeds(self) -> list[tuple[int, str]]:
        """Return ``(index, url)`` for every image in document order."""
        return [
            (i, item.url) for i, item in enumerate(self._items)
            if isinstance(item, ImageEmbed)
        ]

    def plain_text(self) -> str:
        return "".join(item for item in self._items if isinstance(item, str))

    def serialize(self) -> str:
        """Render as HTML, one ``<p>`` per newline-separated line.

        An empty document serialises to ``""``.
        """
        if not self._items:
            return ""
        paragraphs: list[str] = []
        current: list[str] = []
        for item in self._items:
            if isinstance(item, ImageEmbed):
                current.append(f'<img src="{html.escape(item.url, quote=True)}">')
            elif item == "\n":
                paragraphs.append("".join(current))
                current = []
            else:
                current.append(html.escape(item, quote=False))
        paragraphs.append("".join(current))
        return "".join(f"<p>{p or '<br>'}</p>" for p in paragraphs)

    # -- internals ---------------------------------------------------------

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self._items)))

    def _shift_selection(self, index: int, length: int) -> None:
        if self._selection is not None and self._selection >= index:
            self._selection += length
