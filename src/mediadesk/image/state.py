"""Per-request upload state machine.

Tracks one :class:`~mediadesk.models.UploadRequest` through its lifecycle
and enforces valid transitions.  Two overlapping requests each get their
own machine; a second request is never a transition of the first.
"""

from __future__ import annotations

from mediadesk.models import UploadState


class UploadStateMachine:
    """Finite state machine for a single upload request.

    Valid transitions::

        IDLE       -> UPLOADING  (once per request)
        UPLOADING  -> SUCCEEDED | FAILED
        SUCCEEDED  -> IDLE
        FAILED     -> IDLE

    Parameters
    ----------
    request_id:
        Identifier used in error messages, usually the storage key.
    """

    VALID_TRANSITIONS: dict[UploadState, set[UploadState]] = {
        UploadState.IDLE: {UploadState.UPLOADING},
        UploadState.UPLOADING: {UploadState.SUCCEEDED, UploadState.FAILED},
        UploadState.SUCCEEDED: {UploadState.IDLE},
        UploadState.FAILED: {UploadState.IDLE},
    }

    def __init__(self, request_id: str) -> None:
        self.request_id: str = request_id
        self.state: UploadState = UploadState.IDLE
        self.history: list[UploadState] = [UploadState.IDLE]
        self._started = False

    @property
    def settled(self) -> bool:
        """``True`` once the request has finished and returned to ``IDLE``."""
        return self._started and self.state == UploadState.IDLE

    def transition(self, new_state: UploadState) -> None:
        """Move to *new_state*.

        Raises
        ------
        ValueError
            If the transition is not allowed from the current state, or if
            a settled request is asked to upload again.
        """
        if new_state == UploadState.UPLOADING and self._started:
            raise ValueError(
                f"Upload {self.request_id} has already been dispatched; "
                "issue a new request instead of re-entering uploading"
            )

        allowed = self.VALID_TRANSITIONS.get(self.state, set())
        if new_state not in allowed:
            raise ValueError(
                f"Invalid state transition: {self.state.value} -> {new_state.value} "
                f"for upload {self.request_id}. "
                f"Allowed transitions from {self.state.value}: "
                f"{{{', '.join(sorted(s.value for s in allowed))}}}"
            )

        if new_state == UploadState.UPLOADING:
            self._started = True
        self.state = new_state
        self.history.append(new_state)
