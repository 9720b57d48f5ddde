"""Connectivity monitor: owns the optional Redis connection and its availability state."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import TYPE_CHECKING, Callable

from redis.exceptions import RedisError

from sample_api.connectivity.reconnect import ReconnectPolicy
from sample_api.connectivity.state import (
    ConnectivityEvent,
    ConnectivityState,
    TransitionRecord,
    transition,
)
from sample_api.exceptions import CacheConnectionError

if TYPE_CHECKING:
    from sample_api.connectivity.protocols import ICacheClient
    from sample_api.core.config import CacheConfig

log = logging.getLogger(__name__)


class ConnectivityMonitor:
    """Tracks whether the Redis cache is usable.

    Every state change goes through :func:`transition` and is appended to a
    bounded history, so the current state can always be reproduced with
    :func:`~sample_api.connectivity.state.replay`.

    The monitor is driven from the event loop: ``initiate()`` schedules the
    handshake as a task and returns immediately; the task reports back through
    ``on_connected()`` / ``on_error()``. Other components may call
    ``on_error()`` too when a live call proves the connection is gone.

    Args:
        client_factory: Builds the cache client on first connect. The client is
            reused for later attempts.
        connect_timeout: Upper bound on the handshake, in seconds.
        reconnect_policy: When set, an error schedules a new ``initiate()``
            after the policy's next delay. When ``None`` the monitor never
            retries on its own.
        target: Human-readable address used in log records.
    """

    def __init__(
        self,
        client_factory: Callable[[], ICacheClient],
        *,
        connect_timeout: float = 2.0,
        reconnect_policy: ReconnectPolicy | None = None,
        target: str = "redis",
        history_size: int = 100,
    ) -> None:
        self._client_factory = client_factory
        self._connect_timeout = connect_timeout
        self._reconnect_policy = reconnect_policy
        self._target = target
        self._client: ICacheClient | None = None
        self._state = ConnectivityState.UNKNOWN
        self._history: deque[TransitionRecord] = deque(maxlen=history_size)
        self._connect_task: asyncio.Task[None] | None = None
        self._reconnect_task: asyncio.Task[None] | None = None

    @classmethod
    def from_config(cls, config: CacheConfig) -> ConnectivityMonitor:
        """Build a monitor wired to a real ``redis.asyncio`` client."""
        from sample_api.connectivity.redis_client import create_redis_client

        return cls(
            lambda: create_redis_client(config),
            connect_timeout=config.connect_timeout,
            reconnect_policy=ReconnectPolicy.from_config(config),
            target=f"{config.host}:{config.port}",
        )

    # ── Read side ───────────────────────────────────────────────────

    @property
    def current_state(self) -> ConnectivityState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectivityState.CONNECTED

    @property
    def client(self) -> ICacheClient | None:
        """The cache client, or None unless the state is CONNECTED."""
        return self._client if self.is_connected else None

    @property
    def history(self) -> list[TransitionRecord]:
        return list(self._history)

    # ── Lifecycle ───────────────────────────────────────────────────

    def initiate(self) -> None:
        """Start a connection attempt. No-op while connecting or connected.

        Must be called from a running event loop.
        """
        if self._state in (ConnectivityState.CONNECTING, ConnectivityState.CONNECTED):
            log.debug("Connect to %s skipped: already %s", self._target, self._state.value)
            return
        self._apply(ConnectivityEvent.CONNECT_STARTED)
        log.info("Connecting to Redis at %s", self._target)
        self._connect_task = asyncio.get_running_loop().create_task(self._connect())

    async def wait_settled(self) -> ConnectivityState:
        """Wait for the in-flight connection attempt (if any) and return the state."""
        task = self._connect_task
        if task is not None and not task.done():
            await asyncio.shield(task)
        return self._state

    async def close(self) -> None:
        """Cancel pending attempts and release the client."""
        pending = [
            task
            for task in (self._connect_task, self._reconnect_task)
            if task is not None and not task.done()
        ]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._connect_task = None
        self._reconnect_task = None

        if self._client is not None:
            await self._client.aclose()
            self._client = None
        log.debug("Connectivity monitor for %s closed", self._target)

    # ── Callbacks ───────────────────────────────────────────────────

    def on_connected(self) -> None:
        """Handshake completed."""
        record = self._apply(ConnectivityEvent.CONNECTED)
        if not record.changed:
            log.debug("Late connect notification ignored in state %s", record.current.value)
            return
        log.info("Connected to Redis successfully")
        if self._reconnect_policy is not None:
            self._reconnect_policy.reset()

    def on_error(self, reason: str) -> None:
        """Connection-level failure. Never raises."""
        record = self._apply(ConnectivityEvent.ERROR, reason)
        if not record.changed:
            log.debug("Redis error while already unavailable: %s", reason)
            return
        log.warning("Redis connection error: %s", reason)
        self._schedule_reconnect()

    # ── Internals ───────────────────────────────────────────────────

    def _apply(self, event: ConnectivityEvent, reason: str = "") -> TransitionRecord:
        previous = self._state
        self._state = transition(previous, event)
        record = TransitionRecord(event=event, previous=previous, current=self._state, reason=reason)
        self._history.append(record)
        return record

    async def _connect(self) -> None:
        try:
            await self._handshake()
        except CacheConnectionError as exc:
            self.on_error(str(exc))
            return
        self.on_connected()

    async def _handshake(self) -> None:
        try:
            if self._client is None:
                self._client = self._client_factory()
            await asyncio.wait_for(self._client.ping(), timeout=self._connect_timeout)
        except asyncio.TimeoutError as exc:
            raise CacheConnectionError(
                f"handshake with {self._target} timed out after {self._connect_timeout}s"
            ) from exc
        except (RedisError, OSError) as exc:
            raise CacheConnectionError(str(exc) or type(exc).__name__) from exc

    def _schedule_reconnect(self) -> None:
        if self._reconnect_policy is None:
            return
        if self._reconnect_task is not None and not self._reconnect_task.done():
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            log.debug("No running loop; reconnect to %s not scheduled", self._target)
            return
        delay = self._reconnect_policy.next_delay()
        log.info(
            "Reconnecting to Redis at %s in %.1fs (attempt %d)",
            self._target,
            delay,
            self._reconnect_policy.attempts,
        )
        self._reconnect_task = loop.create_task(self._reconnect_after(delay))

    async def _reconnect_after(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self._reconnect_task = None
        self.initiate()
