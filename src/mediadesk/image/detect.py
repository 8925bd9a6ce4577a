"""Image payload detection.

Decides which of the files handed over by a selection surface or a drop
are images, and derives the extension used in storage keys.
"""

from __future__ import annotations

from collections.abc import Iterable

from mediadesk.models import ImageFile

_MIME_EXTENSIONS: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
    "image/avif": "avif",
    "image/x-icon": "ico",
}


def is_image_type(content_type: str | None) -> bool:
    """Return ``True`` if *content_type* names an ``image/*`` MIME type."""
    if not content_type:
        return False
    return content_type.strip().lower().startswith("image/")


def filter_images(files: Iterable[ImageFile]) -> list[ImageFile]:
    """Keep only image-typed files, preserving their original order."""
    return [f for f in files if is_image_type(f.content_type)]


def mime_to_extension(mime_type: str) -> str:
    """Map a MIME type to a bare file extension (no leading dot).

    Unknown types map to ``"bin"``.
    """
    return _MIME_EXTENSIONS.get(mime_type.strip().lower(), "bin")


def file_extension(name: str, content_type: str = "") -> str:
    """Return the lower-cased extension of *name*.

    The extension is whatever follows the last ``.``.  Names without one
    (``"photo"``, ``".hidden"``, ``"trailing."``) fall back to the
    extension implied by *content_type*.

    Examples
    --------
    >>> file_extension("photo.PNG")
    'png'
    >>> file_extension("archive.tar.gz")
    'gz'
    >>> file_extension("snapshot", "image/jpeg")
    'jpg'
    """
    stem, dot, ext = name.rpartition(".")
    if dot and stem and ext:
        return ext.lower()
    return mime_to_extension(content_type)
