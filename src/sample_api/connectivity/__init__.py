"""Redis connectivity: state machine, monitor, reconnect policy and client factory."""

from __future__ import annotations

from sample_api.connectivity.monitor import ConnectivityMonitor
from sample_api.connectivity.protocols import ICacheClient
from sample_api.connectivity.reconnect import ReconnectPolicy
from sample_api.connectivity.state import (
    ConnectivityEvent,
    ConnectivityState,
    TransitionRecord,
    replay,
    transition,
)

__all__ = [
    "ConnectivityEvent",
    "ConnectivityMonitor",
    "ConnectivityState",
    "ICacheClient",
    "ReconnectPolicy",
    "TransitionRecord",
    "replay",
    "transition",
]
