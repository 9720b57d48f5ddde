"""Request-scoped accessors for services stored on ``app.state``."""

from __future__ import annotations

from fastapi import Request

from sample_api.connectivity.monitor import ConnectivityMonitor
from sample_api.core.config import AppSettings
from sample_api.services.counter_service import CounterService
from sample_api.services.user_store import UserStore


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_monitor(request: Request) -> ConnectivityMonitor:
    return request.app.state.monitor


def get_counter_service(request: Request) -> CounterService:
    return request.app.state.counter_service


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store
