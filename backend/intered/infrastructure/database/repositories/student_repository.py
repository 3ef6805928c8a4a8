"""Concrete repository implementation for Student backed by SQLAlchemy."""

from sqlalchemy import func, select

from intered.application.interfaces import StudentRepository
from intered.domain.entities import Student, StudentStage, StudentStatus
from intered.infrastructure.database.models import StudentModel

from .base_repository import SQLAlchemyCrudRepository


class SQLAlchemyStudentRepository(SQLAlchemyCrudRepository[Student, StudentModel], StudentRepository):
    """Implements the StudentRepository port using SQLAlchemy async sessions."""

    _model = StudentModel

    def _to_entity(self, model: StudentModel) -> Student:
        """Map ORM model → domain entity."""
        return Student(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
            status=StudentStatus(model.status),
            stage=StudentStage(model.stage),
            program=model.program,
            university=model.university,
            agent=model.agent,
            nationality=model.nationality,
            notes=model.notes,
            is_high_priority=model.is_high_priority,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_stage(self, stage: str) -> list[Student]:
        stmt = select(StudentModel).where(StudentModel.stage == stage).order_by(StudentModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_existing_emails(self) -> set[str]:
        result = await self._session.execute(select(StudentModel.email))
        return {email.strip().lower() for email in result.scalars().all() if email}

    async def count_by_stage(self) -> dict[str, int]:
        stmt = select(StudentModel.stage, func.count(StudentModel.id)).group_by(StudentModel.stage)
        result = await self._session.execute(stmt)
        return {stage: count for stage, count in result.all()}
