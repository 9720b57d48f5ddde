"""Request logging middleware: one line per inbound request."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

log = logging.getLogger(__name__)


def register_request_logging(app: FastAPI) -> None:
    """Log ``METHOD /path - client_ip`` before each request is handled."""

    @app.middleware("http")
    async def log_request(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        client_ip = request.client.host if request.client else "-"
        log.info("%s %s - %s", request.method, request.url.path, client_ip)
        return await call_next(request)
