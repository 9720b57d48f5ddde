"""Logging setup and request log access."""

from __future__ import annotations

from sample_api.observability.logging_config import setup_logging
from sample_api.observability.request_log import recent_lines

__all__ = ["recent_lines", "setup_logging"]
