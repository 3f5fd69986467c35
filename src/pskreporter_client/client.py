"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Callable
from types import TracebackType

from .client_shared import resolve_cache_store, validate_client_config
from .config import PskReporterClientConfig
from .core.cache_store import CacheStore
from .core.errors import PskReporterClientClosedError
from .core.transport import SyncTransport
from .reports.models import QueryResult
from .reports.service import ReceptionReportService
from .reports.service_shared import QueryInput


class PskReporterClient:
    """Public PSK Reporter client.

    Usage::

        with PskReporterClient() as client:
            result = client.query(SenderCallsign("AG6K"), FlowStartSeconds(-1800))
    """

    def __init__(
        self,
        config: PskReporterClientConfig | None = None,
        *,
        transport: SyncTransport | None = None,
        cache_store: CacheStore | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config or PskReporterClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._service = ReceptionReportService(
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

    def query(self, *items: QueryInput) -> QueryResult:
        """Run a query built from options and/or ReceptionQuery values."""

        self._ensure_open()
        return self._service.query(items)

    def fetch(self, encoded_query: str) -> QueryResult:
        """Run an already encoded query string."""

        self._ensure_open()
        return self._service.fetch(encoded_query)

    def _ensure_open(self) -> None:
        if self._closed:
            raise PskReporterClientClosedError("PskReporterClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "PskReporterClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


def query(*items: QueryInput, config: PskReporterClientConfig | None = None) -> QueryResult:
    """One-shot query with a short-lived default client."""

    with PskReporterClient(config) as client:
        return client.query(*items)


__all__ = [
    "PskReporterClient",
    "query",
]
