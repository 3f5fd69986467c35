"""Response cache storage abstraction, file and in-memory implementations."""

from __future__ import annotations

import hashlib
import os
import re
import tempfile
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

DEFAULT_CACHE_DURATION_SECONDS = 280.0
_CACHE_KEY_RE = re.compile(r"^[0-9a-f]{32}$")


def cache_key(encoded_query: str) -> str:
    """Return the md5 hex digest used to address a cached response."""

    return hashlib.md5(encoded_query.encode("utf-8")).hexdigest()


def validate_cache_key(key: str) -> str:
    if not isinstance(key, str) or _CACHE_KEY_RE.fullmatch(key) is None:
        raise ValueError("cache key is invalid")
    return key


@dataclass(slots=True, frozen=True)
class CacheEntry:
    key: str
    data: bytes
    written_at: float


def is_fresh(entry: CacheEntry, *, now: float, max_age_seconds: float) -> bool:
    return (now - entry.written_at) < max_age_seconds


class CacheStore(Protocol):
    """Key-addressed byte store with write timestamps."""

    def read(self, key: str) -> CacheEntry | None:
        """Return the stored entry, or None when absent."""

    def write(self, key: str, data: bytes) -> None:
        """Store data under key, replacing any previous entry."""


class MemoryCacheStore:
    """Process-local cache store."""

    def __init__(self, *, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.time
        self._lock = threading.Lock()
        self._items: dict[str, CacheEntry] = {}

    def read(self, key: str) -> CacheEntry | None:
        with self._lock:
            return self._items.get(key)

    def write(self, key: str, data: bytes) -> None:
        entry = CacheEntry(key=key, data=bytes(data), written_at=self._clock())
        with self._lock:
            self._items[key] = entry


class FileCacheStore:
    """Filesystem-backed cache store; one file per key, mtime as write time."""

    def __init__(self, *, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir).resolve()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def read(self, key: str) -> CacheEntry | None:
        path = self._path_for(key)
        try:
            with path.open("rb") as file_obj:
                written_at = os.fstat(file_obj.fileno()).st_mtime
                data = file_obj.read()
        except FileNotFoundError:
            return None
        return CacheEntry(key=key, data=data, written_at=written_at)

    def write(self, key: str, data: bytes) -> None:
        path = self._path_for(key)
        self._base_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._base_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as file_obj:
                file_obj.write(data)
                file_obj.flush()
                os.fsync(file_obj.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            self._unlink(Path(tmp_name))
            raise

    def _path_for(self, key: str) -> Path:
        validate_cache_key(key)
        resolved = (self._base_dir / key).resolve()
        if resolved.parent != self._base_dir:
            raise ValueError("cache key is invalid")
        return resolved

    def _unlink(self, path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            return


__all__ = [
    "DEFAULT_CACHE_DURATION_SECONDS",
    "cache_key",
    "validate_cache_key",
    "is_fresh",
    "CacheEntry",
    "CacheStore",
    "MemoryCacheStore",
    "FileCacheStore",
]
