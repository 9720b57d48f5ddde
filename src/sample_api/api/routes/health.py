"""Health, info and service index endpoints."""

from __future__ import annotations

import platform
import sys
import time
from datetime import datetime, timezone
from typing import Any

import psutil
from fastapi import APIRouter, Depends, Request

from sample_api import __version__
from sample_api.api.dependencies import get_monitor, get_settings
from sample_api.connectivity.monitor import ConnectivityMonitor
from sample_api.core.config import AppSettings

router = APIRouter(tags=["health"])

_ENDPOINTS = {
    "health": "GET /health",
    "info": "GET /info",
    "users": "GET /users",
    "createUser": "POST /users",
    "counter": "GET /counter",
    "incrementCounter": "POST /counter/increment",
    "logs": "GET /logs",
}


def _megabytes(num_bytes: int) -> str:
    return f"{round(num_bytes / 1024 / 1024)} MB"


@router.get("/")
async def index() -> dict[str, Any]:
    return {
        "message": "Welcome to Sample API",
        "version": __version__,
        "endpoints": _ENDPOINTS,
    }


@router.get("/health")
async def health(request: Request, monitor: ConnectivityMonitor = Depends(get_monitor)) -> dict[str, Any]:
    """Liveness probe: always 200 while the process is up, reports cache reachability."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - request.app.state.started_at, 3),
        "redis": "connected" if monitor.is_connected else "not connected",
        "redis_state": monitor.current_state.value,
    }


@router.get("/info")
async def info(settings: AppSettings = Depends(get_settings)) -> dict[str, Any]:
    memory = psutil.Process().memory_info()
    return {
        "pythonVersion": platform.python_version(),
        "platform": sys.platform,
        "memory": {
            "rss": _megabytes(memory.rss),
            "vms": _megabytes(memory.vms),
        },
        "environment": settings.server.environment,
        "port": settings.server.port,
    }
