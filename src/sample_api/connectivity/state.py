"""Connectivity state machine: enumerated states, events and pure transitions."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from typing import Iterable


class ConnectivityState(str, Enum):
    UNKNOWN = "unknown"          # No connect attempt has completed yet
    CONNECTING = "connecting"    # Handshake in flight
    CONNECTED = "connected"      # Handshake succeeded, no error since
    UNAVAILABLE = "unavailable"  # Last attempt or call failed


class ConnectivityEvent(str, Enum):
    CONNECT_STARTED = "connect_started"
    CONNECTED = "connected"
    ERROR = "error"


_TRANSITIONS: dict[tuple[ConnectivityState, ConnectivityEvent], ConnectivityState] = {
    (ConnectivityState.UNKNOWN, ConnectivityEvent.CONNECT_STARTED): ConnectivityState.CONNECTING,
    (ConnectivityState.UNAVAILABLE, ConnectivityEvent.CONNECT_STARTED): ConnectivityState.CONNECTING,
    (ConnectivityState.CONNECTING, ConnectivityEvent.CONNECTED): ConnectivityState.CONNECTED,
}


def transition(state: ConnectivityState, event: ConnectivityEvent) -> ConnectivityState:
    """Return the state that follows ``state`` after ``event``.

    An error always lands in UNAVAILABLE. Any other pair not in the table
    leaves the state unchanged, so a late CONNECTED after an ERROR cannot
    revive the connection without a fresh CONNECT_STARTED.
    """
    if event is ConnectivityEvent.ERROR:
        return ConnectivityState.UNAVAILABLE
    return _TRANSITIONS.get((state, event), state)


def replay(
    events: Iterable[ConnectivityEvent],
    initial: ConnectivityState = ConnectivityState.UNKNOWN,
) -> ConnectivityState:
    """Fold a sequence of events into the resulting state."""
    return reduce(transition, events, initial)


@dataclass(frozen=True)
class TransitionRecord:
    """One applied event, kept in the monitor's history."""

    event: ConnectivityEvent
    previous: ConnectivityState
    current: ConnectivityState
    reason: str = ""
    at: float = field(default_factory=time.time)

    @property
    def changed(self) -> bool:
        return self.previous is not self.current
