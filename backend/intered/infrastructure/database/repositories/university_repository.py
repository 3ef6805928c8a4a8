"""SQLAlchemy repositories for universities and programs."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from intered.application.interfaces import ProgramRepository, UniversityRepository
from intered.domain.entities import Program, University, UniversityStatus, UniversityTier
from intered.infrastructure.database.models import ProgramModel, UniversityModel

from .base_repository import SQLAlchemyCrudRepository


class SQLAlchemyUniversityRepository(
    SQLAlchemyCrudRepository[University, UniversityModel], UniversityRepository
):
    _model = UniversityModel

    def _to_entity(self, model: UniversityModel) -> University:
        return University(
            id=model.id,
            name=model.name,
            country=model.country,
            city=model.city,
            province=model.province,
            tier=UniversityTier(model.tier),
            status=UniversityStatus(model.status),
            website=model.website,
            logo=model.logo,
            contact_name=model.contact_name,
            contact_email=model.contact_email,
            contact_phone=model.contact_phone,
            agreement_status=model.agreement_status,
            agreement_date=model.agreement_date,
            agreement_expiry=model.agreement_expiry,
            commission_rate=model.commission_rate,
            notes=model.notes,
            tags=list(model.tags or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class SQLAlchemyProgramRepository(ProgramRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ProgramModel) -> Program:
        return Program(
            id=model.id,
            name=model.name,
            university_id=model.university_id,
            level=model.level,
            duration=model.duration,
            tuition_fee=model.tuition_fee,
            start_date=model.start_date,
            created_at=model.created_at,
        )

    async def get_by_id(self, program_id: int) -> Program | None:
        result = await self._session.get(ProgramModel, program_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[Program]:
        stmt = select(ProgramModel).order_by(ProgramModel.id).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_university(self, university_id: int) -> list[Program]:
        stmt = (
            select(ProgramModel)
            .where(ProgramModel.university_id == university_id)
            .order_by(ProgramModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, program: Program) -> Program:
        model = ProgramModel(
            name=program.name,
            university_id=program.university_id,
            level=program.level,
            duration=program.duration,
            tuition_fee=program.tuition_fee,
            start_date=program.start_date,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
