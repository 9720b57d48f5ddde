"""Configuration and startup validation."""

from __future__ import annotations

from sample_api.core.config import APIConfig, AppSettings, CacheConfig, LoggingConfig, ServerConfig
from sample_api.core.startup_checks import validate_settings

__all__ = [
    "APIConfig",
    "AppSettings",
    "CacheConfig",
    "LoggingConfig",
    "ServerConfig",
    "validate_settings",
]
