"""Cached query execution against the reception report endpoint."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import Protocol

from ..core.cache_store import DEFAULT_CACHE_DURATION_SECONDS, CacheStore
from .models import QueryResult
from .service_shared import (
    PreparedQuery,
    QueryInput,
    decode_response_body,
    load_cached_result,
    prepare_encoded_query,
    prepare_query,
    store_cached_body,
)

logger = logging.getLogger("pskreporter_client")


class GetTransport(Protocol):
    def get(self, url: str) -> bytes: ...


class ReceptionReportService:
    """Look-aside cache around a single GET of the query endpoint.

    A fresh cache entry that decodes cleanly is returned without touching the
    network. Otherwise the endpoint is queried, the body decoded, and the raw
    body written back to the cache. Cache faults never surface as errors.
    """

    def __init__(
        self,
        transport: GetTransport,
        *,
        base_url: str,
        cache_store: CacheStore | None = None,
        cache_duration_seconds: float = DEFAULT_CACHE_DURATION_SECONDS,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._transport = transport
        self._base_url = base_url
        self._cache_store = cache_store
        self._cache_duration_seconds = cache_duration_seconds
        self._clock = clock or time.time

    def query(self, items: Iterable[QueryInput]) -> QueryResult:
        return self._execute(prepare_query(self._base_url, items))

    def fetch(self, encoded_query: str) -> QueryResult:
        return self._execute(prepare_encoded_query(self._base_url, encoded_query))

    def _execute(self, prepared: PreparedQuery) -> QueryResult:
        store = self._cache_store
        if store is not None:
            cached = load_cached_result(
                store,
                prepared.cache_key,
                now=self._clock(),
                max_age_seconds=self._cache_duration_seconds,
            )
            if cached is not None:
                return cached

        body = self._transport.get(prepared.url)
        result = decode_response_body(prepared.url, body)

        if store is not None:
            store_cached_body(store, prepared.cache_key, body)
        logger.info(
            "query success url=%s reception_reports=%s",
            prepared.url,
            len(result.reception_reports),
        )
        return result


__all__ = [
    "ReceptionReportService",
]
