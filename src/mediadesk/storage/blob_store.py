"""Blob store collaborator.

:class:`BlobStore` is the boundary the upload coordinator depends on:

1. **Store object** -- write bytes under ``bucket/key`` and return the
   stored object's path inside the bucket.
2. **Public URL** -- resolve a stored path to a publicly fetchable URL.

:class:`HttpBlobStore` implements it against a Supabase-style storage
REST API through :class:`AsyncStorageTransport`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from urllib.parse import quote

import httpx

from mediadesk.config import MediaDeskConfig
from mediadesk.errors import MediaDeskUploadTransportError

from .transport import AsyncStorageTransport


@runtime_checkable
class BlobStore(Protocol):
    """Object storage as seen by the intake pipeline."""

    async def store_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str = "application/octet-stream",
        upsert: bool = False,
    ) -> str:
        """Store *data* and return its path inside *bucket*.

        Raises
        ------
        MediaDeskUploadTransportError
            If the store rejects the object or cannot be reached.
        """
        ...

    def public_url_for(self, bucket: str, path: str) -> str:
        """Return the public URL of *path* inside *bucket*."""
        ...


def _object_path(bucket: str, key: str) -> str:
    return f"/object/{quote(bucket, safe='')}/{quote(key, safe='/')}"


class HttpBlobStore:
    """:class:`BlobStore` backed by the storage REST API.

    Parameters
    ----------
    config:
        Shared configuration; supplies the base URL and API key.
    transport:
        Optional pre-built :class:`AsyncStorageTransport`.
    http_transport:
        Optional ``httpx`` transport override used when *transport* is not
        given.  Tests pass ``httpx.MockTransport`` here.
    """

    def __init__(
        self,
        config: MediaDeskConfig,
        transport: AsyncStorageTransport | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport or AsyncStorageTransport(config, http_transport)

    async def store_object(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str = "application/octet-stream",
        upsert: bool = False,
    ) -> str:
        """Upload *data* with ``POST /object/{bucket}/{key}``.

        The service answers with ``{"Key": "<bucket>/<path>"}``; the bucket
        prefix is stripped so the returned path can be passed straight to
        :meth:`public_url_for`.  A response without ``Key`` falls back to
        the requested key.
        """
        response = await self._transport.request(
            "POST",
            _object_path(bucket, key),
            content=data,
            headers={
                "Content-Type": content_type or "application/octet-stream",
                "x-upsert": "true" if upsert else "false",
                "cache-control": "max-age=3600",
            },
        )
        stored = response.get("Key") or response.get("key") or key
        if not isinstance(stored, str):
            raise MediaDeskUploadTransportError(
                message=f"Unexpected storage response for {bucket}/{key}",
                context={"bucket": bucket, "key": key, "response": response},
            )
        prefix = f"{bucket}/"
        return stored[len(prefix):] if stored.startswith(prefix) else stored

    def public_url_for(self, bucket: str, path: str) -> str:
        """Build ``{storage_url}/object/public/{bucket}/{path}``."""
        return (
            f"{self._config.storage_url}/object/public/"
            f"{quote(bucket, safe='')}/{quote(path.lstrip('/'), safe='/')}"
        )

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> HttpBlobStore:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
