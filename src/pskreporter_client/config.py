"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import httpx

from .core.cache_store import DEFAULT_CACHE_DURATION_SECONDS

QUERY_URL = "https://retrieve.pskreporter.info/query"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """Response cache settings. Caching is off when directory is None."""

    directory: str | Path | None = None
    duration_seconds: float = DEFAULT_CACHE_DURATION_SECONDS

    @property
    def enabled(self) -> bool:
        return self.directory is not None

    def validate(self) -> None:
        if self.directory is not None and str(self.directory) == "":
            raise ValueError("cache.directory must not be empty")
        if self.duration_seconds < 0:
            raise ValueError("cache.duration_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class PskReporterClientConfig:
    """Runtime configuration for the PSK Reporter client."""

    base_url: str = QUERY_URL
    user_agent: str = "pskreporter-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        try:
            url = httpx.URL(self.base_url)
        except httpx.InvalidURL as exc:
            raise ValueError(f"base_url is invalid: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("base_url must be an absolute http(s) URL")
        self.transport.validate()
        self.cache.validate()


__all__ = [
    "QUERY_URL",
    "TransportConfig",
    "CacheConfig",
    "PskReporterClientConfig",
]
