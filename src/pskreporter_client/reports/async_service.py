"""Async cached query execution against the reception report endpoint."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import Protocol

from ..core.async_cache_store import AsyncCacheStore, AsyncCacheStoreAdapter
from ..core.cache_store import DEFAULT_CACHE_DURATION_SECONDS, CacheStore
from .models import QueryResult
from .service_shared import (
    PreparedQuery,
    QueryInput,
    decode_response_body,
    load_cached_result_async,
    prepare_encoded_query,
    prepare_query,
    store_cached_body_async,
)

logger = logging.getLogger("pskreporter_client")


class AsyncGetTransport(Protocol):
    async def get(self, url: str) -> bytes: ...


class AsyncReceptionReportService:
    """Async counterpart of ReceptionReportService.

    A sync cache store is wrapped in AsyncCacheStoreAdapter so file reads and
    fsynced writes run in worker threads instead of on the event loop.
    """

    def __init__(
        self,
        transport: AsyncGetTransport,
        *,
        base_url: str,
        cache_store: CacheStore | None = None,
        cache_duration_seconds: float = DEFAULT_CACHE_DURATION_SECONDS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._transport = transport
        self._base_url = base_url
        self._cache_store: AsyncCacheStore | None = (
            AsyncCacheStoreAdapter(cache_store) if cache_store is not None else None
        )
        self._cache_duration_seconds = cache_duration_seconds
        self._clock = clock or time.time

    async def query(self, items: Iterable[QueryInput]) -> QueryResult:
        return await self._execute(prepare_query(self._base_url, items))

    async def fetch(self, encoded_query: str) -> QueryResult:
        return await self._execute(prepare_encoded_query(self._base_url, encoded_query))

    async def _execute(self, prepared: PreparedQuery) -> QueryResult:
        store = self._cache_store
        if store is not None:
            cached = await load_cached_result_async(
                store,
                prepared.cache_key,
                now=self._clock(),
                max_age_seconds=self._cache_duration_seconds,
            )
            if cached is not None:
                return cached

        body = await self._transport.get(prepared.url)
        result = decode_response_body(prepared.url, body)

        if store is not None:
            await store_cached_body_async(store, prepared.cache_key, body)
        logger.info(
            "query success url=%s reception_reports=%s",
            prepared.url,
            len(result.reception_reports),
        )
        return result


__all__ = [
    "AsyncReceptionReportService",
]
