"""Dashboard statistics: stage counts for students and applications."""

from intered.application.interfaces import ApplicationRepository, StudentRepository
from intered.domain.entities import ApplicationStage, StudentStage


class StatsService:
    """Counts per pipeline stage. Every stage is present, with 0 when empty."""

    def __init__(self, student_repository: StudentRepository, application_repository: ApplicationRepository):
        self._students = student_repository
        self._applications = application_repository

    async def student_stage_counts(self) -> dict[str, int]:
        counts = await self._students.count_by_stage()
        return {stage.value: counts.get(stage.value, 0) for stage in StudentStage}

    async def application_stage_counts(self) -> dict[str, int]:
        counts = await self._applications.count_by_stage()
        return {stage.value: counts.get(stage.value, 0) for stage in ApplicationStage}
