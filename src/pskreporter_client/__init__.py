"""Public package exports for the PSK Reporter client."""

from .async_client import AsyncPskReporterClient
from .client import PskReporterClient, query
from .config import CacheConfig, PskReporterClientConfig, TransportConfig

__all__ = [
    "PskReporterClient",
    "AsyncPskReporterClient",
    "PskReporterClientConfig",
    "CacheConfig",
    "TransportConfig",
    "query",
]
