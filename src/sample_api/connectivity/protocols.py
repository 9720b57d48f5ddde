"""Cache client protocol: the subset of ``redis.asyncio.Redis`` the service uses."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ICacheClient(Protocol):
    """Async key-value client contract.

    ``redis.asyncio.Redis`` satisfies it directly; tests inject a fake.
    """

    async def ping(self) -> Any:
        """Round-trip to the server. Raises on any connection-level failure."""
        ...

    async def get(self, key: str) -> Any | None:
        """Return the raw stored value, or None when the key is absent."""
        ...

    async def incr(self, key: str) -> int:
        """Atomically increment ``key`` by one and return the new value."""
        ...

    async def aclose(self) -> None:
        """Release the underlying connection pool."""
        ...
