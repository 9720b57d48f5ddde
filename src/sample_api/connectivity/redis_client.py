"""Redis client factory using ``redis.asyncio``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

if TYPE_CHECKING:
    from sample_api.connectivity.protocols import ICacheClient
    from sample_api.core.config import CacheConfig


def create_redis_client(config: CacheConfig) -> ICacheClient:
    """Create an async Redis client for ``config``.

    The client connects lazily, so construction never touches the network.
    Socket timeouts mirror the configured handshake and command timeouts, and
    redis-py's own retries are disabled so a failure surfaces immediately.
    """
    return aioredis.Redis(
        host=config.host,
        port=config.port,
        db=config.db,
        socket_connect_timeout=config.connect_timeout,
        socket_timeout=config.command_timeout,
        retry_on_timeout=False,
        retry=Retry(NoBackoff(), retries=0),
        decode_responses=True,
    )
