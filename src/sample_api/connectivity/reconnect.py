"""Exponential backoff schedule for re-establishing the Redis connection."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sample_api.core.config import CacheConfig


class ReconnectPolicy:
    """Capped exponential backoff.

    ``next_delay()`` returns the wait before the next attempt and advances the
    schedule; ``reset()`` is called after a successful handshake.
    """

    def __init__(
        self,
        initial_delay: float = 1.0,
        max_delay: float = 30.0,
        multiplier: float = 2.0,
    ) -> None:
        self._initial_delay = initial_delay
        self._max_delay = max_delay
        self._multiplier = multiplier
        self._attempts = 0

    @classmethod
    def from_config(cls, config: CacheConfig) -> ReconnectPolicy | None:
        """Build a policy from ``CacheConfig``; ``None`` when reconnects are disabled."""
        if not config.reconnect_enabled:
            return None
        return cls(
            initial_delay=config.reconnect_initial_delay,
            max_delay=config.reconnect_max_delay,
            multiplier=config.reconnect_multiplier,
        )

    @property
    def attempts(self) -> int:
        return self._attempts

    def next_delay(self) -> float:
        delay = min(self._initial_delay * (self._multiplier ** self._attempts), self._max_delay)
        self._attempts += 1
        return delay

    def reset(self) -> None:
        self._attempts = 0
