"""Authoring-surface components.

Exports
-------
AuthoringSurface
    Owns one draft and wires every entry point to one coordinator.
FeaturedImageSlot / FeaturedImagePicker
    The cover image and its explicit picker.
DragDropZone
    Drop target feeding the featured slot when it is empty.
InlineEmbedTrigger
    Toolbar action embedding an image at a captured cursor.
CursorCapture
    One-shot cursor position token.
RichTextEditor / DeltaDocument
    Rich-text engine boundary and a minimal in-memory engine.
FileSelector / QueuedFileSelector
    Reusable file-selection component.
"""

from .cursor import CursorCapture
from .document import DeltaDocument, ImageEmbed, RichTextEditor
from .dropzone import DragDropZone
from .featured import FeaturedImagePicker, FeaturedImageSlot
from .inline import InlineEmbedTrigger
from .selection import FileSelector, QueuedFileSelector
from .surface import AuthoringSurface

__all__ = [
    "AuthoringSurface",
    "CursorCapture",
    "DeltaDocument",
    "DragDropZone",
    "FeaturedImagePicker",
    "FeaturedImageSlot",
    "FileSelector",
    "ImageEmbed",
    "InlineEmbedTrigger",
    "QueuedFileSelector",
    "RichTextEditor",
]
