"""Key and payload redaction for safe debug output.

:func:`redact` is applied to every storage request summary before it is
written anywhere.  It enforces the following rules:

* Values under sensitive keys (``authorization``, ``apikey``, ...) are
  masked, keeping at most the last four characters of the known API key.
* Raw ``bytes`` values are replaced with ``<binary:N_bytes>``.
* The full API key never appears in the output, even inside free text.
"""

from __future__ import annotations

import copy
import re
from typing import Any

# Substrings: if any of these appear in a key name (case-insensitive), the
# value is redacted.
_SENSITIVE_KEY_PATTERNS: frozenset[str] = frozenset({
    "apikey",
    "api_key",
    "api-key",
    "authorization",
    "token",
    "secret",
    "password",
    "cookie",
})


def _mask_secret(value: str, secret: str | None) -> str:
    """Replace *secret* and any ``Bearer <x>`` value with a placeholder."""
    if secret and secret in value:
        suffix = secret[-4:] if len(secret) >= 8 else "****"
        value = value.replace(secret, f"<redacted:...{suffix}>")
    return re.sub(r"(Bearer\s+)\S+", r"\1<redacted>", value)


def _redact_value(value: Any, secret: str | None) -> Any:
    if isinstance(value, dict):
        return _redact_dict(value, secret)
    if isinstance(value, (list, tuple)):
        return [_redact_value(item, secret) for item in value]
    if isinstance(value, (bytes, bytearray)):
        return f"<binary:{len(value)}_bytes>"
    if isinstance(value, str) and secret:
        return _mask_secret(value, secret)
    return value


def _redact_dict(d: dict, secret: str | None) -> dict:
    result: dict = {}
    for key, value in d.items():
        key_lower = key.lower() if isinstance(key, str) else ""
        if any(pat in key_lower for pat in _SENSITIVE_KEY_PATTERNS):
            masked = _mask_secret(value, secret) if isinstance(value, str) else value
            # Unrecognised secrets are dropped entirely.
            result[key] = masked if masked != value else "<redacted>"
        else:
            result[key] = _redact_value(value, secret)
    return result


def redact(payload: dict, secret: str | None = None) -> dict:
    """Return a deep copy of *payload* with sensitive data removed.

    Parameters
    ----------
    payload:
        Request summary, headers, or response body to sanitise.
    secret:
        The storage API key.  Every occurrence is scrubbed.

    Examples
    --------
    >>> redact({"apikey": "abc"})
    {'apikey': '<redacted>'}
    >>> redact({"body": b"\\x89PNG"})
    {'body': '<binary:4_bytes>'}
    """
    safe = copy.deepcopy(payload)
    return _redact_dict(safe, secret)
