"""Request log tail endpoint."""

from __future__ import annotations

import logging
from typing import Union

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sample_api.api.dependencies import get_settings
from sample_api.core.config import AppSettings
from sample_api.observability.request_log import recent_lines

log = logging.getLogger(__name__)

router = APIRouter(tags=["logs"])


class LogsResponse(BaseModel):
    success: bool = True
    count: int
    logs: list[str]


@router.get("/logs", response_model=LogsResponse)
async def view_logs(settings: AppSettings = Depends(get_settings)) -> Union[LogsResponse, JSONResponse]:
    """Last ``LOG_RECENT_LINES`` lines of the request log."""
    try:
        lines = recent_lines(settings.logging.file_path, settings.logging.recent_lines)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Failed to read logs from %s: %s", settings.logging.file_path, exc)
        return JSONResponse(status_code=500, content={"success": False, "error": "Failed to read logs"})
    return LogsResponse(count=len(lines), logs=lines)
