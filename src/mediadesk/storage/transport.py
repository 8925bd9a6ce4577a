"""Async HTTP transport for the storage REST API.

The transport handles one request at a time:

1. Send the HTTP request with ``apikey`` and bearer headers.
2. On ``2xx`` -- return the parsed JSON response (``{}`` when empty).
3. On any other status -- raise the matching
   :class:`~mediadesk.errors.MediaDeskUploadTransportError` subclass.
4. On timeout / connection failure -- raise
   :class:`~mediadesk.errors.MediaDeskNetworkError`.

Uploads are never retried here.  A failed upload is reported to the user,
who re-triggers the action.
"""

from __future__ import annotations

import json as _json
import sys
import time
from typing import Any, NoReturn

import httpx

from mediadesk.config import MediaDeskConfig
from mediadesk.errors import (
    MediaDeskAuthError,
    MediaDeskConflictError,
    MediaDeskNetworkError,
    MediaDeskNotFoundError,
    MediaDeskPermissionError,
    MediaDeskUploadTransportError,
)
from mediadesk.observability import NoopMetricsHook, get_logger

log = get_logger("mediadesk.transport")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _effective_status(response: httpx.Response, body: dict) -> int:
    """Return the status the storage service meant.

    Some storage gateways wrap the real status in a ``400`` response body
    as ``{"statusCode": "409", ...}``; prefer that value when present.
    """
    raw = body.get("statusCode")
    try:
        return int(raw) if raw is not None else response.status_code
    except (TypeError, ValueError):
        return response.status_code


def _raise_for_status(response: httpx.Response, method: str, path: str) -> NoReturn:
    """Raise the appropriate :class:`MediaDeskUploadTransportError` subclass."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    status = _effective_status(response, body)
    server_message = body.get("message") or body.get("error") or response.text[:500]
    ctx: dict[str, Any] = {"status_code": status, "path": path}

    if status == 401:
        raise MediaDeskAuthError(
            message=f"Authentication failed on {method} {path}: {server_message}",
            context=ctx,
        )
    if status == 403:
        raise MediaDeskPermissionError(
            message=f"Permission denied on {method} {path}: {server_message}",
            context=ctx,
        )
    if status == 404:
        raise MediaDeskNotFoundError(
            message=f"Not found on {method} {path}: {server_message}",
            context=ctx,
        )
    if status == 409:
        raise MediaDeskConflictError(
            message=f"Object already exists on {method} {path}: {server_message}",
            context=ctx,
        )
    raise MediaDeskUploadTransportError(
        message=f"Storage error {status} on {method} {path}: {server_message}",
        context=ctx,
    )


def _dump_request(
    config: MediaDeskConfig,
    method: str,
    response: httpx.Response,
    headers: dict[str, str] | None,
) -> None:
    """Write a redacted summary of the request/response to stderr."""
    from mediadesk.utils.redact import redact

    try:
        resp_body: Any = response.json()
    except ValueError:
        resp_body = response.text[:1000]
    dump = {
        "method": method,
        "url": str(response.url),
        "request_headers": dict(headers or {}),
        "request_bytes": len(response.request.content),
        "response_status": response.status_code,
        "response_body": resp_body,
    }
    print(
        _json.dumps(redact(dump, config.api_key), indent=2, default=str),
        file=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Async transport
# ---------------------------------------------------------------------------

class AsyncStorageTransport:
    """Asynchronous HTTP transport for the storage service.

    Parameters
    ----------
    config:
        A :class:`MediaDeskConfig` instance.
    transport:
        Optional ``httpx`` transport override, e.g. ``httpx.MockTransport``
        in tests.
    """

    def __init__(
        self,
        config: MediaDeskConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()

        headers = {"apikey": config.api_key}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"

        self._client = httpx.AsyncClient(
            base_url=config.storage_url,
            headers=headers,
            timeout=httpx.Timeout(config.timeout_seconds),
            proxy=config.http_proxy,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._config.storage_url

    async def request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Execute one HTTP request against the storage API.

        Parameters
        ----------
        method:
            HTTP verb.
        path:
            Path relative to ``config.storage_url``.
        **kwargs:
            Forwarded to :meth:`httpx.AsyncClient.request`.

        Returns
        -------
        dict
            Parsed JSON body, or ``{}`` for empty responses.

        Raises
        ------
        MediaDeskNetworkError
            On timeouts and connection failures.
        MediaDeskUploadTransportError
            On any non-2xx response.
        """
        t0 = time.monotonic()
        try:
            response = await self._client.request(method, path, **kwargs)
        except (httpx.TimeoutException, httpx.NetworkError) as exc:
            self._metrics.increment(
                "mediadesk.requests_total",
                tags={"method": method, "status": "error"},
            )
            log.warning(
                "Storage request network error",
                extra={
                    "extra_fields": {
                        "op": "request",
                        "method": method,
                        "path": path,
                        "error": str(exc),
                    }
                },
            )
            raise MediaDeskNetworkError(
                message=f"Network error on {method} {path}: {exc}",
                context={"url": path},
                cause=exc,
            ) from exc

        elapsed_ms = (time.monotonic() - t0) * 1000
        self._metrics.increment(
            "mediadesk.requests_total",
            tags={"method": method, "status": str(response.status_code)},
        )
        log.debug(
            "Storage request complete",
            extra={
                "extra_fields": {
                    "op": "request",
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "elapsed_ms": round(elapsed_ms, 1),
                }
            },
        )

        if self._config.debug_dump_payload:
            _dump_request(self._config, method, response, kwargs.get("headers"))

        if 200 <= response.status_code < 300:
            if response.status_code == 204 or not response.content:
                return {}
            try:
                result = response.json()
            except ValueError as exc:
                raise MediaDeskUploadTransportError(
                    message=f"Malformed JSON response on {method} {path}",
                    context={"status_code": response.status_code, "path": path},
                    cause=exc,
                ) from exc
            return result if isinstance(result, dict) else {"result": result}

        _raise_for_status(response, method, path)

    async def close(self) -> None:
        """Close the underlying async HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncStorageTransport:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
