"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType

from .client_shared import resolve_cache_store, validate_client_config
from .config import PskReporterClientConfig
from .core.async_transport import AsyncTransport
from .core.cache_store import CacheStore
from .core.errors import PskReporterClientClosedError
from .reports.async_service import AsyncReceptionReportService
from .reports.models import QueryResult
from .reports.service_shared import QueryInput


class AsyncPskReporterClient:
    """Public async PSK Reporter client."""

    def __init__(
        self,
        config: PskReporterClientConfig | None = None,
        *,
        transport: AsyncTransport | None = None,
        cache_store: CacheStore | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config or PskReporterClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._service = AsyncReceptionReportService(
            self._transport,
            base_url=self._config.base_url,
            cache_store=resolve_cache_store(config=self._config, cache_store=cache_store),
            cache_duration_seconds=self._config.cache.duration_seconds,
            clock=clock,
        )
        self._closed = False

    @property
    def config(self) -> PskReporterClientConfig:
        return self._config

    async def query(self, *items: QueryInput) -> QueryResult:
        self._ensure_open()
        return await self._service.query(items)

    async def fetch(self, encoded_query: str) -> QueryResult:
        self._ensure_open()
        return await self._service.fetch(encoded_query)

    def _ensure_open(self) -> None:
        if self._closed:
            raise PskReporterClientClosedError("AsyncPskReporterClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncPskReporterClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncPskReporterClient",
]
