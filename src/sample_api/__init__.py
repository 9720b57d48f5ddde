"""sample-api: demo HTTP API with users, a Redis-backed counter and a request log.

Public API::

    from sample_api import (
        AppSettings, create_app,
        ConnectivityMonitor, ConnectivityState,
        CounterService, CounterReading, StorageMode,
        UserStore,
    )
"""

from __future__ import annotations

import importlib.metadata
from typing import Any


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("sample-api")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


__version__ = _get_version()

__all__ = [
    "__version__",
    "AppSettings",
    "ConnectivityMonitor",
    "ConnectivityState",
    "CounterReading",
    "CounterService",
    "StorageMode",
    "UserStore",
    "create_app",
]


# Lazy so that importing a leaf module (e.g. the state machine) does not pull in FastAPI.
def __getattr__(name: str) -> Any:
    if name == "AppSettings":
        from sample_api.core.config import AppSettings

        return AppSettings
    if name in ("ConnectivityMonitor", "ConnectivityState"):
        from sample_api import connectivity

        return getattr(connectivity, name)
    if name in ("CounterReading", "CounterService", "StorageMode", "UserStore"):
        from sample_api import services

        return getattr(services, name)
    if name == "create_app":
        from sample_api.api.app import create_app

        return create_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
