"""Tests for CounterService: Redis path, degraded paths and failure reporting."""

from __future__ import annotations

from redis.exceptions import ResponseError

from sample_api.connectivity.monitor import ConnectivityMonitor
from sample_api.connectivity.state import ConnectivityState
from sample_api.services.counter_service import (
    INCREMENT_UNAVAILABLE,
    CounterReading,
    CounterService,
    StorageMode,
)
from tests.fakes.fake_cache_client import FakeCacheClient


async def _connected_service(client: FakeCacheClient, **kwargs: object) -> tuple[CounterService, ConnectivityMonitor]:
    monitor = ConnectivityMonitor(lambda: client, connect_timeout=0.5)
    monitor.initiate()
    assert await monitor.wait_settled() is ConnectivityState.CONNECTED
    return CounterService(monitor, **kwargs), monitor  # type: ignore[arg-type]


class TestCounterReading:
    def test_display_value_for_number(self) -> None:
        assert CounterReading(3, StorageMode.REDIS).display_value == 3

    def test_display_value_for_sentinel(self) -> None:
        reading = CounterReading(None, StorageMode.NOT_AVAILABLE)
        assert reading.available is False
        assert reading.display_value == INCREMENT_UNAVAILABLE


class TestNotConnected:
    async def test_read_in_unknown_state_uses_memory(self, monitor: ConnectivityMonitor) -> None:
        service = CounterService(monitor)
        reading = await service.read()
        assert reading == CounterReading(0, StorageMode.MEMORY)

    async def test_increment_returns_sentinel(self, monitor: ConnectivityMonitor) -> None:
        service = CounterService(monitor)
        reading = await service.increment()
        assert reading == CounterReading(None, StorageMode.NOT_AVAILABLE)

    async def test_unavailable_increment_leaves_local_value_untouched(self, monitor: ConnectivityMonitor) -> None:
        service = CounterService(monitor, local_value=7)
        for _ in range(3):
            assert (await service.increment()).available is False
        assert await service.read() == CounterReading(7, StorageMode.MEMORY)
        assert service.local_value == 7


class TestConnected:
    async def test_absent_key_reads_zero(self, fake_client: FakeCacheClient) -> None:
        service, _ = await _connected_service(fake_client)
        assert await service.read() == CounterReading(0, StorageMode.REDIS)

    async def test_increment_sequence(self, fake_client: FakeCacheClient) -> None:
        service, _ = await _connected_service(fake_client)

        assert await service.increment() == CounterReading(1, StorageMode.REDIS)
        assert await service.increment() == CounterReading(2, StorageMode.REDIS)
        assert await service.read() == CounterReading(2, StorageMode.REDIS)

    async def test_uses_configured_key(self, fake_client: FakeCacheClient) -> None:
        service, _ = await _connected_service(fake_client, key="hits")
        await service.increment()
        assert fake_client.store == {"hits": "1"}

    async def test_reads_value_written_by_another_process(self, fake_client: FakeCacheClient) -> None:
        fake_client.store["api_counter"] = "41"
        service, _ = await _connected_service(fake_client)
        assert await service.increment() == CounterReading(42, StorageMode.REDIS)


class TestRemoteFailures:
    async def test_read_failure_falls_back_to_local(self, fake_client: FakeCacheClient) -> None:
        service, monitor = await _connected_service(fake_client)
        fake_client.disconnect()

        reading = await service.read()

        assert reading == CounterReading(0, StorageMode.MEMORY)
        assert monitor.current_state is ConnectivityState.UNAVAILABLE

    async def test_disconnect_mid_session_yields_sentinel(self, fake_client: FakeCacheClient) -> None:
        service, monitor = await _connected_service(fake_client)
        assert (await service.increment()).value == 1

        fake_client.disconnect()

        assert await service.increment() == CounterReading(None, StorageMode.NOT_AVAILABLE)
        assert monitor.current_state is ConnectivityState.UNAVAILABLE
        # Once unavailable, the cache is not touched again.
        fake_client.reachable = True
        assert await service.increment() == CounterReading(None, StorageMode.NOT_AVAILABLE)
        assert fake_client.store["api_counter"] == "1"

    async def test_command_error_degrades_only_that_request(self, fake_client: FakeCacheClient) -> None:
        service, monitor = await _connected_service(fake_client)
        fake_client.failure = ResponseError("WRONGTYPE Operation against a key holding the wrong kind of value")

        assert await service.increment() == CounterReading(None, StorageMode.NOT_AVAILABLE)
        assert await service.read() == CounterReading(0, StorageMode.MEMORY)
        assert monitor.current_state is ConnectivityState.CONNECTED

        fake_client.failure = None
        assert await service.increment() == CounterReading(1, StorageMode.REDIS)

    async def test_unparsable_value_falls_back(self, fake_client: FakeCacheClient) -> None:
        fake_client.store["api_counter"] = "not-a-number"
        service, monitor = await _connected_service(fake_client)

        assert await service.read() == CounterReading(0, StorageMode.MEMORY)
        assert monitor.current_state is ConnectivityState.CONNECTED

    async def test_negative_value_falls_back(self, fake_client: FakeCacheClient) -> None:
        fake_client.store["api_counter"] = "-3"
        service, _ = await _connected_service(fake_client)

        assert (await service.read()).mode is StorageMode.MEMORY

    async def test_call_timeout_marks_cache_unavailable(self, fake_client: FakeCacheClient) -> None:
        service, monitor = await _connected_service(fake_client, command_timeout=0.05)
        fake_client.delay = 1.0

        assert await service.increment() == CounterReading(None, StorageMode.NOT_AVAILABLE)
        assert monitor.current_state is ConnectivityState.UNAVAILABLE
        assert "timed out" in monitor.history[-1].reason
