"""Counter service: Redis-backed when available, degraded otherwise."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from sample_api.exceptions import RemoteCallError

if TYPE_CHECKING:
    from sample_api.connectivity.monitor import ConnectivityMonitor
    from sample_api.core.config import CacheConfig

log = logging.getLogger(__name__)

INCREMENT_UNAVAILABLE = "Redis not available"


class StorageMode(str, Enum):
    REDIS = "redis"                  # Authoritative, shared value
    MEMORY = "memory"                # Process-local fallback value
    NOT_AVAILABLE = "not available"  # No increment took place


@dataclass(frozen=True)
class CounterReading:
    """A counter value together with the storage that produced it.

    ``value`` is None only for an increment that could not be performed.
    """

    value: int | None
    mode: StorageMode

    @property
    def available(self) -> bool:
        return self.value is not None

    @property
    def display_value(self) -> int | str:
        return self.value if self.value is not None else INCREMENT_UNAVAILABLE


class CounterService:
    """Reads and increments the shared counter.

    The decision to use Redis is taken per call from the monitor's current
    state. A failing call degrades only that request; connection-level
    failures are also reported to the monitor. The local fallback value is
    never incremented and never reconciled with Redis.
    """

    def __init__(
        self,
        monitor: ConnectivityMonitor,
        *,
        key: str = "api_counter",
        command_timeout: float = 1.0,
        local_value: int = 0,
    ) -> None:
        self._monitor = monitor
        self._key = key
        self._command_timeout = command_timeout
        self._local_value = local_value

    @classmethod
    def from_config(cls, monitor: ConnectivityMonitor, config: CacheConfig) -> CounterService:
        return cls(monitor, key=config.counter_key, command_timeout=config.command_timeout)

    @property
    def local_value(self) -> int:
        return self._local_value

    async def read(self) -> CounterReading:
        """Current counter value; the local fallback when Redis can't answer."""
        client = self._monitor.client
        if client is None:
            return CounterReading(self._local_value, StorageMode.MEMORY)

        try:
            raw = await self._call(client.get(self._key), "GET")
            value = _parse_counter(raw)
        except RemoteCallError as exc:
            self._handle_failure(exc)
            return CounterReading(self._local_value, StorageMode.MEMORY)
        return CounterReading(value, StorageMode.REDIS)

    async def increment(self) -> CounterReading:
        """Atomically increment the Redis counter.

        Returns an unavailable reading instead of a number whenever the
        increment did not reach Redis.
        """
        client = self._monitor.client
        if client is None:
            return CounterReading(None, StorageMode.NOT_AVAILABLE)

        try:
            value = int(await self._call(client.incr(self._key), "INCR"))
        except RemoteCallError as exc:
            self._handle_failure(exc)
            return CounterReading(None, StorageMode.NOT_AVAILABLE)

        log.info("Counter incremented to %d (Redis)", value)
        return CounterReading(value, StorageMode.REDIS)

    async def _call(self, pending: Awaitable[Any], operation: str) -> Any:
        try:
            return await asyncio.wait_for(pending, timeout=self._command_timeout)
        except asyncio.TimeoutError as exc:
            raise RemoteCallError(
                f"{operation} {self._key} timed out after {self._command_timeout}s",
                connection_lost=True,
            ) from exc
        except (RedisConnectionError, RedisTimeoutError, OSError) as exc:
            raise RemoteCallError(str(exc) or type(exc).__name__, connection_lost=True) from exc
        except RedisError as exc:
            raise RemoteCallError(str(exc) or type(exc).__name__) from exc

    def _handle_failure(self, exc: RemoteCallError) -> None:
        log.error("Redis error: %s", exc)
        if exc.connection_lost:
            self._monitor.on_error(str(exc))


def _parse_counter(raw: Any) -> int:
    """Parse a stored counter; an absent key counts as zero."""
    if raw is None:
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise RemoteCallError(f"Stored counter is not an integer: {raw!r}") from exc
    if value < 0:
        raise RemoteCallError(f"Stored counter is negative: {value}")
    return value
