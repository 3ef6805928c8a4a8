"""Concrete repository implementation for Application backed by SQLAlchemy."""

from sqlalchemy import func, select

from intered.application.interfaces import ApplicationRepository
from intered.domain.entities import Application, ApplicationStage, ApplicationStatus
from intered.infrastructure.database.models import ApplicationModel

from .base_repository import SQLAlchemyCrudRepository


class SQLAlchemyApplicationRepository(
    SQLAlchemyCrudRepository[Application, ApplicationModel], ApplicationRepository
):
    _model = ApplicationModel

    def _to_entity(self, model: ApplicationModel) -> Application:
        return Application(
            id=model.id,
            student_id=model.student_id,
            university_id=model.university_id,
            program_id=model.program_id,
            agent_id=model.agent_id,
            stage=ApplicationStage(model.stage),
            status=ApplicationStatus(model.status),
            intake_date=model.intake_date,
            application_date=model.application_date,
            decision_date=model.decision_date,
            notes=model.notes,
            is_high_priority=model.is_high_priority,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_filtered(
        self,
        *,
        stage: str | None = None,
        student_id: int | None = None,
        university_id: int | None = None,
        program_id: int | None = None,
    ) -> list[Application]:
        stmt = select(ApplicationModel)

        if stage is not None:
            stmt = stmt.where(ApplicationModel.stage == stage)
        if student_id is not None:
            stmt = stmt.where(ApplicationModel.student_id == student_id)
        if university_id is not None:
            stmt = stmt.where(ApplicationModel.university_id == university_id)
        if program_id is not None:
            stmt = stmt.where(ApplicationModel.program_id == program_id)

        result = await self._session.execute(stmt.order_by(ApplicationModel.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count_by_stage(self) -> dict[str, int]:
        stmt = select(ApplicationModel.stage, func.count(ApplicationModel.id)).group_by(
            ApplicationModel.stage
        )
        result = await self._session.execute(stmt)
        return {stage: count for stage, count in result.all()}
