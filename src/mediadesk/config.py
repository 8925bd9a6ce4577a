"""Configuration for mediadesk.

:class:`MediaDeskConfig` is a plain dataclass that captures every tuneable
knob of the intake pipeline.  A single instance is shared by the blob
store, the upload coordinator and the authoring surface.

Two module-level constants name the default storage buckets:

* :data:`DEFAULT_POST_IMAGES_BUCKET` -- featured and inline post images.
* :data:`DEFAULT_AVATARS_BUCKET` -- profile avatars.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Bucket constants
# ---------------------------------------------------------------------------

DEFAULT_POST_IMAGES_BUCKET: str = "blog-images"
"""Bucket receiving featured and inline post images."""

DEFAULT_AVATARS_BUCKET: str = "avatars"
"""Bucket receiving profile avatars."""

MIN_KEY_SUFFIX_LENGTH: int = 6


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass
class MediaDeskConfig:
    """Complete configuration for the media intake pipeline.

    Parameters
    ----------
    api_key:
        Storage service key sent as both ``apikey`` and bearer token.
        Never logged.
    storage_url:
        Root URL of the storage REST API, e.g.
        ``https://<project>.supabase.co/storage/v1``.
    post_images_bucket:
        Bucket for featured and inline images.
    avatars_bucket:
        Bucket for profile avatars.
    key_suffix_length:
        Length of the random component of generated storage keys.  Drawn
        from 36 symbols, so the default of 10 gives about 3.6e15 values per
        millisecond.
    accept:
        The ``accept`` filter handed to file selectors.
    timeout_seconds:
        HTTP request timeout in seconds.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    metrics:
        Optional :class:`~mediadesk.observability.MetricsHook` backend.
    debug_dump_payload:
        Write a redacted summary of each storage request to *stderr*.
    """

    # ── Storage ─────────────────────────────────────────────────────────
    api_key: str = ""

    storage_url: str = "http://localhost:54321/storage/v1"

    post_images_bucket: str = DEFAULT_POST_IMAGES_BUCKET

    avatars_bucket: str = DEFAULT_AVATARS_BUCKET

    # ── Keys ────────────────────────────────────────────────────────────
    key_suffix_length: int = 10

    # ── Selection ───────────────────────────────────────────────────────
    accept: str = "image/*"

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float = 30.0

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.storage_url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(
                f"storage_url must be an http(s) URL, got {self.storage_url!r}"
            )
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"storage_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API key, or target localhost for testing."
            )
        self.storage_url = self.storage_url.rstrip("/")

        if not self.post_images_bucket:
            raise ValueError("post_images_bucket must not be empty")
        if not self.avatars_bucket:
            raise ValueError("avatars_bucket must not be empty")
        if self.key_suffix_length < MIN_KEY_SUFFIX_LENGTH:
            raise ValueError(
                f"key_suffix_length must be >= {MIN_KEY_SUFFIX_LENGTH}, "
                f"got {self.key_suffix_length}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    def __repr__(self) -> str:
        """Mask the API key to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "api_key":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"api_key='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"MediaDeskConfig({', '.join(parts)})"
