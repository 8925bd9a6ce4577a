"""Full error hierarchy for the mediadesk package.

Every public error class inherits from MediaDeskError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Only :class:`MediaDeskUploadTransportError` and its subclasses can occur
during a normal upload, and the upload coordinator always converts them
into an :class:`~mediadesk.models.UploadFailure`.  The remaining errors
signal programming mistakes and are raised to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    UPLOAD_TRANSPORT_ERROR = "UPLOAD_TRANSPORT_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    NETWORK_ERROR = "NETWORK_ERROR"
    SELECTION_ERROR = "SELECTION_ERROR"
    CURSOR_ERROR = "CURSOR_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class MediaDeskError(Exception):
    """Base exception for all mediadesk errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Upload transport errors
# ---------------------------------------------------------------------------

class MediaDeskUploadTransportError(MediaDeskError):
    """The blob store rejected an upload or could not be reached.

    Context keys: ``bucket``, ``key``, ``status_code``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        code: str = ErrorCode.UPLOAD_TRANSPORT_ERROR,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class MediaDeskAuthError(MediaDeskUploadTransportError):
    """The store returned 401: the API key is invalid or expired."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.AUTH_ERROR)


class MediaDeskPermissionError(MediaDeskUploadTransportError):
    """The store returned 403: the key may not write to this bucket."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.PERMISSION_ERROR)


class MediaDeskNotFoundError(MediaDeskUploadTransportError):
    """The store returned 404: usually an unknown bucket."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.NOT_FOUND)


class MediaDeskConflictError(MediaDeskUploadTransportError):
    """The store returned 409: an object already exists under this key
    and upsert was not requested.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.CONFLICT)


class MediaDeskNetworkError(MediaDeskUploadTransportError):
    """A transport-level failure occurred (timeout, DNS, connection reset).

    Context keys: ``url``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context, cause, code=ErrorCode.NETWORK_ERROR)


# ---------------------------------------------------------------------------
# Editor-side errors
# ---------------------------------------------------------------------------

class MediaDeskSelectionError(MediaDeskError):
    """A file selection was requested while another one is still open.

    Context keys: ``accept``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.SELECTION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class MediaDeskCursorError(MediaDeskError):
    """A captured cursor position was consumed more than once.

    Context keys: ``index``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CURSOR_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
