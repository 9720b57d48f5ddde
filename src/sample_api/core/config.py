"""Nested pydantic-settings configuration for the application.

Each group reads its own environment variables. The names match the ones the
service has always honoured (``PORT``, ``REDIS_HOST``, ``REDIS_PORT``) so
existing deployments keep working.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerConfig(BaseSettings):
    """HTTP listener configuration.

    Env vars are unprefixed::

        export PORT=3000
        export ENVIRONMENT=production
    """

    model_config = {"env_prefix": ""}

    port: int = Field(default=3000, ge=1, le=65535)
    host: str = "0.0.0.0"
    environment: str = "development"
    cors_origins: list[str] = ["*"]


class CacheConfig(BaseSettings):
    """Optional Redis cache backing the shared counter.

    Env vars use ``REDIS_`` prefix::

        export REDIS_HOST=redis
        export REDIS_PORT=6379
        export REDIS_RECONNECT_ENABLED=true
    """

    model_config = {"env_prefix": "REDIS_"}

    enabled: bool = True
    host: str = "localhost"
    port: int = Field(default=6379, ge=1, le=65535)
    db: int = Field(default=0, ge=0)
    counter_key: str = "api_counter"
    connect_timeout: float = 2.0
    command_timeout: float = 1.0
    # Block startup until the first handshake settles (bounded by connect_timeout).
    wait_on_startup: bool = False

    # Off by default: once unavailable, the cache stays unavailable.
    reconnect_enabled: bool = False
    reconnect_initial_delay: float = 1.0
    reconnect_max_delay: float = 30.0
    reconnect_multiplier: float = 2.0


class LoggingConfig(BaseSettings):
    """Logging and request-log file configuration.

    Env vars use ``LOG_`` prefix.
    """

    model_config = {"env_prefix": "LOG_"}

    level: str = "INFO"
    dir: Path = Path("logs")
    file_name: str = "app.log"
    recent_lines: int = Field(default=50, ge=1)

    @property
    def file_path(self) -> Path:
        return self.dir / self.file_name


class APIConfig(BaseSettings):
    """OpenAPI metadata.

    Env vars use ``API_`` prefix.
    """

    model_config = {"env_prefix": "API_"}

    title: str = "Sample API"
    description: str = "Demo API with users, a Redis-backed counter and a request log."


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: APIConfig = Field(default_factory=APIConfig)
