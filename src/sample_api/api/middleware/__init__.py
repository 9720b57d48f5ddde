"""HTTP middleware and exception handlers."""

from __future__ import annotations

from sample_api.api.middleware.error_handler import register_error_handlers
from sample_api.api.middleware.request_logging import register_request_logging

__all__ = ["register_error_handlers", "register_request_logging"]
