"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlsplit, urlunsplit

import httpx

from ..config import PskReporterClientConfig


def build_default_headers(config: PskReporterClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/xml, text/xml",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: PskReporterClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def compose_request_url(base_url: str, encoded_query: str) -> str:
    """Replace the query component of base_url with encoded_query."""

    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, encoded_query, parts.fragment))


def response_status(response: object) -> int | None:
    return getattr(response, "status_code", None)


def response_body(response: object) -> bytes:
    content = getattr(response, "content", b"")
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "compose_request_url",
    "response_status",
    "response_body",
]
