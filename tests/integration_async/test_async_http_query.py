from __future__ import annotations

import httpx
import pytest

from pskreporter_client.async_client import AsyncPskReporterClient
from pskreporter_client.client import PskReporterClient
from pskreporter_client.core.async_transport import AsyncTransport
from pskreporter_client.core.errors import PskReporterStatusError, PskReporterTransportError
from pskreporter_client.core.transport import SyncTransport
from pskreporter_client.reports.options import FlowStartSeconds, Mode, SenderCallsign
from tests.shared.transport import build_config


def _async_client(handler, **config_kwargs) -> AsyncPskReporterClient:
    config = build_config(**config_kwargs)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncPskReporterClient(config, transport=AsyncTransport(config, client=http_client))


@pytest.mark.asyncio
async def test_async_query_round_trip_with_disk_cache(tmp_path, response_xml):
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, content=response_xml)

    async with _async_client(handler, cache_dir=tmp_path) as client:
        first = await client.query(SenderCallsign("AG6K"), FlowStartSeconds(-1800))
        second = await client.query(FlowStartSeconds(-1800), SenderCallsign("AG6K"))

    assert len(requests) == 1
    assert requests[0].url.params["senderCallsign"] == "AG6K"
    assert first == second


@pytest.mark.asyncio
async def test_async_and_sync_clients_share_cache_entries(tmp_path, response_xml):
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(200, content=response_xml)

    config = build_config(cache_dir=tmp_path)
    sync_transport = SyncTransport(config, client=httpx.Client(transport=httpx.MockTransport(handler)))
    with PskReporterClient(config, transport=sync_transport) as sync_client:
        sync_result = sync_client.query(Mode("FT8"), SenderCallsign("AG6K"))

    async with _async_client(handler, cache_dir=tmp_path) as client:
        async_result = await client.query(SenderCallsign("AG6K"), Mode("FT8"))

    assert calls == 1
    assert async_result == sync_result


@pytest.mark.asyncio
async def test_async_http_error_and_connect_error(tmp_path):
    def failing(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    async with _async_client(failing, cache_dir=tmp_path) as client:
        with pytest.raises(PskReporterStatusError) as excinfo:
            await client.query(SenderCallsign("AG6K"))
    assert excinfo.value.http_status == 503

    def refused(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _async_client(refused, cache_dir=tmp_path) as client:
        with pytest.raises(PskReporterTransportError):
            await client.query(SenderCallsign("AG6K"))

    assert list(tmp_path.iterdir()) == []
