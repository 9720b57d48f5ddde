"""Counter endpoints: Redis-backed, degrading to memory / not-available."""

from __future__ import annotations

from typing import Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from sample_api.api.dependencies import get_counter_service
from sample_api.services.counter_service import CounterReading, CounterService

router = APIRouter(tags=["counter"])


class CounterResponse(BaseModel):
    """``counter`` is a string only when an increment could not be performed."""

    success: bool = True
    counter: Union[int, str]
    storage: str

    @classmethod
    def from_reading(cls, reading: CounterReading) -> CounterResponse:
        return cls(counter=reading.display_value, storage=reading.mode.value)


@router.get("/counter", response_model=CounterResponse)
async def read_counter(service: CounterService = Depends(get_counter_service)) -> CounterResponse:
    return CounterResponse.from_reading(await service.read())


@router.post("/counter/increment", response_model=CounterResponse)
async def increment_counter(service: CounterService = Depends(get_counter_service)) -> CounterResponse:
    return CounterResponse.from_reading(await service.increment())
