"""Tests for the capped exponential reconnect backoff."""

from __future__ import annotations

from sample_api.connectivity.reconnect import ReconnectPolicy
from sample_api.core.config import CacheConfig


class TestReconnectPolicy:
    def test_delays_grow_and_cap(self):
        policy = ReconnectPolicy(initial_delay=1.0, max_delay=30.0, multiplier=2.0)
        delays = [policy.next_delay() for _ in range(7)]
        assert delays == [1.0, 2.0, 4.0, 8.0, 16.0, 30.0, 30.0]
        assert policy.attempts == 7

    def test_reset_restarts_schedule(self):
        policy = ReconnectPolicy(initial_delay=0.5, max_delay=10.0, multiplier=3.0)
        policy.next_delay()
        policy.next_delay()
        policy.reset()
        assert policy.attempts == 0
        assert policy.next_delay() == 0.5

    def test_multiplier_of_one_is_constant(self):
        policy = ReconnectPolicy(initial_delay=2.0, max_delay=10.0, multiplier=1.0)
        assert [policy.next_delay() for _ in range(3)] == [2.0, 2.0, 2.0]


class TestFromConfig:
    def test_disabled_by_default(self):
        assert ReconnectPolicy.from_config(CacheConfig()) is None

    def test_enabled_uses_config_values(self):
        config = CacheConfig(
            reconnect_enabled=True,
            reconnect_initial_delay=0.25,
            reconnect_max_delay=1.0,
            reconnect_multiplier=4.0,
        )
        policy = ReconnectPolicy.from_config(config)
        assert policy is not None
        assert [policy.next_delay() for _ in range(3)] == [0.25, 1.0, 1.0]
