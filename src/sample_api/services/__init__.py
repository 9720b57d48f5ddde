"""Application services: counter and user store."""

from __future__ import annotations

from sample_api.services.counter_service import (
    INCREMENT_UNAVAILABLE,
    CounterReading,
    CounterService,
    StorageMode,
)
from sample_api.services.user_store import User, UserStore

__all__ = [
    "INCREMENT_UNAVAILABLE",
    "CounterReading",
    "CounterService",
    "StorageMode",
    "User",
    "UserStore",
]
