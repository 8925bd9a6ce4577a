"""Storage key generation.

Keys have the shape ``"{timestamp_ms}_{suffix}.{extension}"``.  The
timestamp alone cannot separate two uploads issued in the same
millisecond; the random suffix is what keeps keys distinct.
"""

from __future__ import annotations

import secrets
import string
import time

from .detect import file_extension

KEY_ALPHABET: str = string.ascii_lowercase + string.digits


def random_suffix(length: int = 10) -> str:
    """Draw *length* characters from :data:`KEY_ALPHABET` using a CSPRNG."""
    if length < 1:
        raise ValueError(f"length must be >= 1, got {length}")
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(length))


def generate_storage_key(
    name: str,
    content_type: str = "",
    *,
    suffix_length: int = 10,
    now_ms: int | None = None,
    suffix: str | None = None,
) -> str:
    """Build a collision-resistant key for a newly uploaded post image.

    Parameters
    ----------
    name:
        Original file name; supplies the extension.
    content_type:
        MIME type, used for the extension when *name* has none.
    suffix_length:
        Length of the random suffix when *suffix* is not given.
    now_ms:
        Timestamp override in Unix milliseconds.  Defaults to the wall
        clock.
    suffix:
        Random-suffix override.  Intended for tests.

    Examples
    --------
    >>> generate_storage_key("photo.png", now_ms=1700000000000, suffix="abc123")
    '1700000000000_abc123.png'
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    if suffix is None:
        suffix = random_suffix(suffix_length)
    return f"{now_ms}_{suffix}.{file_extension(name, content_type)}"


def avatar_storage_key(user_id: str, name: str, content_type: str = "") -> str:
    """Build the deterministic avatar key ``"{user_id}.{extension}"``.

    Avatars are written with upsert semantics, so a user's new avatar
    replaces the previous object with the same extension.
    """
    if not user_id:
        raise ValueError("user_id must not be empty")
    return f"{user_id}.{file_extension(name, content_type)}"
