"""Application service (use case) for student applications.

Every foreign key on an application (student, university, program and the
optional agent) is resolved before anything is written; an unknown id
raises InvalidReferenceError, which the API layer reports as 400.
"""

import logging
from dataclasses import dataclass

from intered.application.interfaces import (
    AgentRepository,
    ApplicationRepository,
    ProgramRepository,
    StudentRepository,
    UniversityRepository,
)
from intered.application.schemas import ApplicationCreate, ApplicationUpdate
from intered.domain.entities import Application
from intered.domain.exceptions import EntityNotFoundError, InvalidReferenceError

logger = logging.getLogger(__name__)


@dataclass
class EnrichedApplication:
    """An application plus the display names the student detail view needs."""

    application: Application
    university_name: str | None = None
    program_name: str | None = None


class ApplicationService:
    def __init__(
        self,
        repository: ApplicationRepository,
        student_repository: StudentRepository,
        university_repository: UniversityRepository,
        program_repository: ProgramRepository,
        agent_repository: AgentRepository,
    ):
        self._repository = repository
        self._students = student_repository
        self._universities = university_repository
        self._programs = program_repository
        self._agents = agent_repository

    async def get_application(self, application_id: int) -> Application:
        application = await self._repository.get_by_id(application_id)
        if application is None:
            raise EntityNotFoundError("Application", application_id)
        return application

    async def list_applications(self, skip: int = 0, limit: int = 1000) -> list[Application]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def list_by_stage(self, stage: str) -> list[Application]:
        return await self._repository.get_filtered(stage=stage)

    async def list_by_university(self, university_id: int) -> list[Application]:
        return await self._repository.get_filtered(university_id=university_id)

    async def list_by_program(self, program_id: int) -> list[Application]:
        return await self._repository.get_filtered(program_id=program_id)

    async def list_for_student(self, student_id: int) -> list[EnrichedApplication]:
        """Applications of one student, each with university and program names."""
        applications = await self._repository.get_filtered(student_id=student_id)

        enriched = []
        for application in applications:
            university = await self._universities.get_by_id(application.university_id)
            program = await self._programs.get_by_id(application.program_id)
            enriched.append(
                EnrichedApplication(
                    application=application,
                    university_name=university.name if university else None,
                    program_name=program.name if program else None,
                )
            )
        return enriched

    async def create_application(self, data: ApplicationCreate) -> Application:
        values = data.model_dump()
        await self._check_references(values)
        created = await self._repository.create(Application(**values))
        logger.info(
            "Created application %s (student=%s, university=%s)",
            created.id, created.student_id, created.university_id,
        )
        return created

    async def update_application(self, application_id: int, data: ApplicationUpdate) -> Application:
        application = await self.get_application(application_id)
        changes = data.model_dump(exclude_unset=True)
        await self._check_references(changes)
        application.update(changes)
        return await self._repository.update(application)

    async def delete_application(self, application_id: int) -> bool:
        await self.get_application(application_id)
        return await self._repository.delete(application_id)

    async def _check_references(self, values: dict) -> None:
        checks = (
            ("student_id", "studentId", "Student", self._students),
            ("university_id", "universityId", "University", self._universities),
            ("program_id", "programId", "Program", self._programs),
            ("agent_id", "agentId", "Agent", self._agents),
        )
        for key, wire_name, entity_type, repository in checks:
            ref = values.get(key)
            if ref is None:
                continue
            if await repository.get_by_id(ref) is None:
                raise InvalidReferenceError(wire_name, entity_type, ref)
