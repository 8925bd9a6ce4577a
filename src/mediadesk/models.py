"""Public data models for mediadesk.

This module contains every request, outcome, enum and state type
referenced by the public API surface.  All types are plain dataclasses
with no behaviour beyond small derived properties.
"""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class UploadTarget(str, Enum):
    """Where the caller intends to reconcile an upload's result."""

    FEATURED = "featured"
    """The explicit featured-image picker.  Always overwrites the slot."""

    DROPPED = "dropped"
    """The drag-and-drop zone.  Fills the featured slot only if empty."""

    INLINE = "inline"
    """The toolbar "insert image" action.  Embeds at a captured cursor."""


class UploadState(str, Enum):
    """Lifecycle states for a single upload request."""

    IDLE = "idle"
    """No transfer in progress."""

    UPLOADING = "uploading"
    """The blob store call is in flight."""

    SUCCEEDED = "succeeded"
    """The store accepted the object and a public URL was resolved."""

    FAILED = "failed"
    """The store rejected the object or could not be reached."""


class NotificationKind(str, Enum):
    """Severity of a user-facing notification."""

    SUCCESS = "success"
    FAILURE = "failure"


# ---------------------------------------------------------------------------
# Files and requests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ImageFile:
    """A binary blob with a name and a MIME type.

    Attributes
    ----------
    name:
        Original file name as chosen by the user (e.g. ``"photo.png"``).
    content_type:
        MIME type reported by the selection surface.  May be empty when
        the host cannot determine it.
    data:
        Raw file bytes.
    """

    name: str
    content_type: str
    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: str | Path) -> ImageFile:
        """Read a local file, guessing the MIME type from its extension."""
        file_path = Path(path).expanduser()
        content_type, _ = mimetypes.guess_type(file_path.name)
        return cls(
            name=file_path.name,
            content_type=content_type or "application/octet-stream",
            data=file_path.read_bytes(),
        )

    def __repr__(self) -> str:
        return (
            f"ImageFile(name={self.name!r}, content_type={self.content_type!r}, "
            f"size={self.size})"
        )


@dataclass(frozen=True, eq=False)
class UploadRequest:
    """A single upload handed to the coordinator.

    Requests compare and hash by identity: two requests for the same file
    are two uploads, and one request may be dispatched only once.

    Attributes
    ----------
    file:
        The image to upload.
    target:
        Which entry point issued the request.
    generation:
        Authoring-session generation at construction time.  Outcomes whose
        generation no longer matches the live session are not reconciled.
    """

    file: ImageFile
    target: UploadTarget
    generation: int = 0


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UploadSuccess:
    """The object was stored; *url* is publicly fetchable."""

    url: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class UploadFailure:
    """The upload failed; *message* is suitable for display."""

    message: str

    @property
    def ok(self) -> bool:
        return False


UploadOutcome = Union[UploadSuccess, UploadFailure]
"""Tagged result of one upload.  Exactly one variant, never both."""


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Notification:
    """A fire-and-forget message for the user.

    Attributes
    ----------
    kind:
        Success or failure.
    title:
        Short headline (e.g. ``"Image uploaded!"``).
    detail:
        One-line description.
    """

    kind: NotificationKind
    title: str
    detail: str = ""


# ---------------------------------------------------------------------------
# Draft state
# ---------------------------------------------------------------------------

@dataclass
class EditorDraftState:
    """Everything the authoring surface holds for one draft.

    Mutated only through explicit setters on
    :class:`~mediadesk.editor.surface.AuthoringSurface` or by upload
    reconciliation.

    Attributes
    ----------
    title, content, excerpt:
        Plain user-edited fields.  *content* is the rich document's
        serialised form.
    featured_image_url:
        The cover image, or ``None`` when the slot is empty.
    uploading:
        ``True`` while at least one upload is in flight.
    last_error:
        Message of the most recent failed upload, cleared when a new
        upload starts.
    generation:
        Bumped every time the surface is reset.
    """

    title: str = ""
    content: str = ""
    excerpt: str = ""
    featured_image_url: str | None = None
    uploading: bool = False
    last_error: str | None = None
    generation: int = 0
