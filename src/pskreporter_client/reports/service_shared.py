"""Shared query preparation and cache policy for sync/async services."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..core.async_cache_store import AsyncCacheStore
from ..core.cache_store import CacheEntry, CacheStore, cache_key, is_fresh
from ..core.errors import PskReporterProtocolError
from ..core.transport_shared import compose_request_url
from .models import QueryResult
from .options import QueryOption
from .params import ParameterSet, build_query
from .parser import decode_query_result
from .queries import ReceptionQuery

logger = logging.getLogger("pskreporter_client")

QueryInput = QueryOption | ReceptionQuery


@dataclass(slots=True, frozen=True)
class PreparedQuery:
    encoded_query: str
    url: str
    cache_key: str


def flatten_options(items: Iterable[QueryInput]) -> tuple[QueryOption, ...]:
    options: list[QueryOption] = []
    for item in items:
        if isinstance(item, ReceptionQuery):
            options.extend(item.to_options())
            continue
        if not callable(getattr(item, "apply", None)):
            raise TypeError(f"unsupported query option: {item!r}")
        options.append(item)
    return tuple(options)


def prepare_query(base_url: str, items: Iterable[QueryInput]) -> PreparedQuery:
    """Validate options and compose the request URL; performs no I/O."""

    encoded_query = build_query(
        flatten_options(items),
        base_params=ParameterSet.from_url(base_url),
    )
    return prepare_encoded_query(base_url, encoded_query)


def prepare_encoded_query(base_url: str, encoded_query: str) -> PreparedQuery:
    return PreparedQuery(
        encoded_query=encoded_query,
        url=compose_request_url(base_url, encoded_query),
        cache_key=cache_key(encoded_query),
    )


def load_cached_result(
    store: CacheStore,
    key: str,
    *,
    now: float,
    max_age_seconds: float,
) -> QueryResult | None:
    """Return a fresh, decodable cached result or None. Never raises."""

    try:
        entry = store.read(key)
    except Exception as exc:
        logger.warning("cache read failed key=%s error=%s", key, exc.__class__.__name__)
        return None
    return _result_from_entry(entry, key, now=now, max_age_seconds=max_age_seconds)


async def load_cached_result_async(
    store: AsyncCacheStore,
    key: str,
    *,
    now: float,
    max_age_seconds: float,
) -> QueryResult | None:
    try:
        entry = await store.read(key)
    except Exception as exc:
        logger.warning("cache read failed key=%s error=%s", key, exc.__class__.__name__)
        return None
    return _result_from_entry(entry, key, now=now, max_age_seconds=max_age_seconds)


def _result_from_entry(
    entry: CacheEntry | None,
    key: str,
    *,
    now: float,
    max_age_seconds: float,
) -> QueryResult | None:
    if entry is None:
        logger.debug("cache miss key=%s", key)
        return None
    if not is_fresh(entry, now=now, max_age_seconds=max_age_seconds):
        logger.debug("cache expired key=%s age=%.1f", key, now - entry.written_at)
        return None
    try:
        result = decode_query_result(entry.data)
    except PskReporterProtocolError:
        logger.warning("corrupt cache entry ignored key=%s", key)
        return None
    logger.info("cache hit key=%s", key)
    return result


def store_cached_body(store: CacheStore, key: str, body: bytes) -> None:
    """Best-effort cache write; failures are logged and dropped."""

    try:
        store.write(key, body)
    except Exception as exc:
        logger.warning("cache write failed key=%s error=%s", key, exc.__class__.__name__)


async def store_cached_body_async(store: AsyncCacheStore, key: str, body: bytes) -> None:
    try:
        await store.write(key, body)
    except Exception as exc:
        logger.warning("cache write failed key=%s error=%s", key, exc.__class__.__name__)


def decode_response_body(url: str, body: bytes) -> QueryResult:
    try:
        return decode_query_result(body)
    except PskReporterProtocolError:
        logger.error("response parse error url=%s", url)
        raise


__all__ = [
    "QueryInput",
    "PreparedQuery",
    "flatten_options",
    "prepare_query",
    "prepare_encoded_query",
    "load_cached_result",
    "load_cached_result_async",
    "store_cached_body",
    "store_cached_body_async",
    "decode_response_body",
]
