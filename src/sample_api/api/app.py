"""FastAPI application with lifespan management."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sample_api import __version__
from sample_api.api.middleware import register_error_handlers, register_request_logging
from sample_api.api.routes import counter, health, logs, users
from sample_api.connectivity.monitor import ConnectivityMonitor
from sample_api.core.config import APIConfig, AppSettings, ServerConfig
from sample_api.core.startup_checks import validate_settings
from sample_api.observability import setup_logging
from sample_api.services.counter_service import CounterService
from sample_api.services.user_store import UserStore

log = logging.getLogger(__name__)


def create_app(
    settings: AppSettings | None = None,
    *,
    monitor: ConnectivityMonitor | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Explicit settings; read from the environment at startup when omitted.
        monitor: Pre-built connectivity monitor (tests inject one around a fake
            client). Built from ``settings.cache`` when omitted.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application startup/shutdown lifecycle."""
        app_settings = settings or AppSettings()
        validate_settings(app_settings)
        setup_logging(app_settings.logging)

        app_monitor = monitor or ConnectivityMonitor.from_config(app_settings.cache)
        if app_settings.cache.enabled:
            app_monitor.initiate()
            if app_settings.cache.wait_on_startup:
                await app_monitor.wait_settled()
        else:
            log.info("Redis disabled; counter served from memory")

        app.state.settings = app_settings
        app.state.started_at = time.monotonic()
        app.state.monitor = app_monitor
        app.state.counter_service = CounterService.from_config(app_monitor, app_settings.cache)
        app.state.user_store = UserStore()

        log.info("Server started on port %d", app_settings.server.port)
        try:
            yield
        finally:
            await app_monitor.close()
            log.info("Server stopped")

    api_config = settings.api if settings is not None else APIConfig()
    server_config = settings.server if settings is not None else ServerConfig()

    app = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=server_config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )
    register_request_logging(app)
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(counter.router)
    app.include_router(logs.router)
    return app


app = create_app()
