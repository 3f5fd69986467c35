"""Async cache store adapter."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

from .cache_store import CacheEntry, CacheStore

T = TypeVar("T")


class AsyncCacheStore(Protocol):
    """Async counterpart of CacheStore."""

    async def read(self, key: str) -> CacheEntry | None:
        """Return the stored entry, or None when absent."""

    async def write(self, key: str, data: bytes) -> None:
        """Store data under key, replacing any previous entry."""


class AsyncCacheStoreAdapter:
    """Wrap a sync store and execute operations in worker threads."""

    def __init__(
        self,
        store: CacheStore,
        *,
        run_sync: Callable[..., Awaitable[T]] | None = None,
    ) -> None:
        self._store = store
        self._run_sync: Callable[..., Awaitable[T]] = run_sync or _default_run_sync

    @property
    def store(self) -> CacheStore:
        return self._store

    async def read(self, key: str) -> CacheEntry | None:
        return await self._run_sync(self._store.read, key)

    async def write(self, key: str, data: bytes) -> None:
        await self._run_sync(self._store.write, key, data)


async def _default_run_sync(func: Callable[..., T], *args: Any) -> T:
    return await asyncio.to_thread(func, *args)


__all__ = [
    "AsyncCacheStore",
    "AsyncCacheStoreAdapter",
]
