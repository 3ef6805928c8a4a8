"""Application service (use case) for universities and their programs."""

import logging

from intered.application.interfaces import ProgramRepository, UniversityRepository
from intered.application.schemas import ProgramCreate, UniversityCreate, UniversityUpdate
from intered.domain.entities import Program, University
from intered.domain.exceptions import EntityNotFoundError, InvalidReferenceError

logger = logging.getLogger(__name__)


class UniversityService:
    """Orchestrates university CRUD and program creation."""

    def __init__(self, repository: UniversityRepository, program_repository: ProgramRepository):
        self._repository = repository
        self._programs = program_repository

    async def get_university(self, university_id: int) -> University:
        university = await self._repository.get_by_id(university_id)
        if university is None:
            raise EntityNotFoundError("University", university_id)
        return university

    async def list_universities(self, skip: int = 0, limit: int = 1000) -> list[University]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_university(self, data: UniversityCreate) -> University:
        university = University(**data.model_dump())
        created = await self._repository.create(university)
        logger.info("Created university %s (%s)", created.id, created.name)
        return created

    async def update_university(self, university_id: int, data: UniversityUpdate) -> University:
        university = await self.get_university(university_id)
        university.update(data.model_dump(exclude_unset=True))
        return await self._repository.update(university)

    async def delete_university(self, university_id: int) -> bool:
        await self.get_university(university_id)
        return await self._repository.delete(university_id)

    # ── Programs ────────────────────────────────────────────────────

    async def get_program(self, program_id: int) -> Program:
        program = await self._programs.get_by_id(program_id)
        if program is None:
            raise EntityNotFoundError("Program", program_id)
        return program

    async def list_programs(self) -> list[Program]:
        return await self._programs.get_all()

    async def list_programs_for_university(self, university_id: int) -> list[Program]:
        return await self._programs.get_by_university(university_id)

    async def create_program(self, data: ProgramCreate) -> Program:
        if await self._repository.get_by_id(data.university_id) is None:
            raise InvalidReferenceError("universityId", "University", data.university_id)
        return await self._programs.create(Program(**data.model_dump()))
