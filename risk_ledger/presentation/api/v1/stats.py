"""Ledger statistics API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from risk_ledger.application.services import StatsService
from risk_ledger.core.dependencies import get_stats_service
from risk_ledger.presentation.schemas import StatsResponseSchema

stats_router = APIRouter()


@stats_router.get(
    "/stats",
    response_model=StatsResponseSchema,
    summary="Ledger Statistics",
    description="Aggregate disbursement counters and the active model version.",
)
async def get_stats(
    stats_service: Annotated[StatsService, Depends(get_stats_service)],
) -> StatsResponseSchema:
    stats = await stats_service.get_stats()
    return StatsResponseSchema(**stats.to_dict())
