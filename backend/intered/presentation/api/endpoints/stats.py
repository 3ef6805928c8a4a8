"""Dashboard statistics endpoints."""

from fastapi import APIRouter, Depends

from intered.application.services import StatsService
from intered.infrastructure.dependencies import get_stats_service

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/students/stage-counts")
async def student_stage_counts(service: StatsService = Depends(get_stats_service)) -> dict[str, int]:
    return await service.student_stage_counts()


@router.get("/applications/stage-counts")
async def application_stage_counts(service: StatsService = Depends(get_stats_service)) -> dict[str, int]:
    return await service.application_stage_counts()
