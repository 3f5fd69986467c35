"""Sync HTTP transport with status evaluation."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import PskReporterClientConfig
from .errors import PskReporterStatusError, PskReporterTransportError
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    response_body,
    response_status,
)

logger = logging.getLogger("pskreporter_client")


class SyncTransportClient(Protocol):
    def get(self, url: str) -> object: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for the PSK Reporter query endpoint."""

    def __init__(
        self,
        config: PskReporterClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
            follow_redirects=True,
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def get(self, url: str) -> bytes:
        """Issue a GET and return the body of a 200 response."""

        if self._closed:
            raise PskReporterTransportError("transport is already closed")

        logger.debug("request start url=%s", url)
        try:
            response = self._client.get(url)
        except Exception as exc:
            logger.error(
                "request network error url=%s error=%s",
                url,
                exc.__class__.__name__,
            )
            raise PskReporterTransportError(
                f"network/transport error: {exc}",
            ) from exc

        http_status = response_status(response)
        if http_status != 200:
            logger.error("unexpected http status url=%s http_status=%s", url, http_status)
            raise PskReporterStatusError(
                f"unexpected http response {http_status}",
                http_status=http_status,
            )

        logger.debug("response received url=%s http_status=%s", url, http_status)
        return response_body(response)


__all__ = [
    "SyncTransport",
]
