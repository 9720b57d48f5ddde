"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sample_api.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_timeouts(settings)
    _check_reconnect(settings)
    _check_log_dir(settings)


def _check_timeouts(settings: AppSettings) -> None:
    """Reject non-positive timeouts; a zero timeout would fail every Redis call."""
    cache = settings.cache
    if cache.connect_timeout <= 0:
        raise ValueError(f"REDIS_CONNECT_TIMEOUT must be positive, got {cache.connect_timeout}")
    if cache.command_timeout <= 0:
        raise ValueError(f"REDIS_COMMAND_TIMEOUT must be positive, got {cache.command_timeout}")


def _check_reconnect(settings: AppSettings) -> None:
    """Reject backoff parameters that could not produce a sane delay sequence."""
    cache = settings.cache
    if not cache.reconnect_enabled:
        return
    if cache.reconnect_initial_delay <= 0:
        raise ValueError("REDIS_RECONNECT_INITIAL_DELAY must be positive.")
    if cache.reconnect_max_delay < cache.reconnect_initial_delay:
        raise ValueError(
            "REDIS_RECONNECT_MAX_DELAY must be >= REDIS_RECONNECT_INITIAL_DELAY "
            f"({cache.reconnect_max_delay} < {cache.reconnect_initial_delay})."
        )
    if cache.reconnect_multiplier < 1.0:
        raise ValueError("REDIS_RECONNECT_MULTIPLIER must be >= 1.0.")


def _check_log_dir(settings: AppSettings) -> None:
    """Warn about a relative log directory in containerized environments."""
    is_container = bool(
        os.environ.get("ECS_CONTAINER_METADATA_URI")
        or os.environ.get("KUBERNETES_SERVICE_HOST")
    )
    if is_container and not settings.logging.dir.is_absolute():
        log.warning(
            "LOG_DIR=%s is relative in a container environment. "
            "The request log will be lost on container restart. Mount a volume and set an absolute LOG_DIR.",
            settings.logging.dir,
        )
