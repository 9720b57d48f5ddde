"""Shared fixtures for sample-api tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from sample_api.connectivity.monitor import ConnectivityMonitor
from sample_api.core.config import AppSettings, CacheConfig, LoggingConfig
from tests.fakes.fake_cache_client import FakeCacheClient


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """``setup_logging`` replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    return tmp_path / "logs"


@pytest.fixture
def settings(log_dir: Path) -> AppSettings:
    """Test settings: short timeouts, startup waits for the handshake, logs under tmp."""
    return AppSettings(
        cache=CacheConfig(wait_on_startup=True, connect_timeout=0.5, command_timeout=0.5),
        logging=LoggingConfig(dir=log_dir),
    )


@pytest.fixture
def fake_client() -> FakeCacheClient:
    return FakeCacheClient()


@pytest.fixture
def monitor(fake_client: FakeCacheClient) -> ConnectivityMonitor:
    """Monitor around ``fake_client``; not yet initiated."""
    return ConnectivityMonitor(lambda: fake_client, connect_timeout=0.5, target="fake:6379")
