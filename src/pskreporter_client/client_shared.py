"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import PskReporterClientConfig
from .core.cache_store import CacheStore, FileCacheStore
from .core.errors import PskReporterValidationError


def validate_client_config(config: PskReporterClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise PskReporterValidationError(str(exc), kind="invalid_config") from exc


def resolve_cache_store(
    *,
    config: PskReporterClientConfig,
    cache_store: CacheStore | None,
) -> CacheStore | None:
    if cache_store is not None:
        return cache_store
    if config.cache.directory is not None:
        return FileCacheStore(base_dir=config.cache.directory)
    return None


__all__ = [
    "validate_client_config",
    "resolve_cache_store",
]
