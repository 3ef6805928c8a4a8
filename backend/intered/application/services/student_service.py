"""Application service (use case) for Student operations."""

from intered.application.interfaces import (
    AgentRepository,
    ProgramRepository,
    StudentRepository,
    UniversityRepository,
)
from intered.application.schemas import StudentCreate, StudentUpdate
from intered.domain.entities import Student
from intered.domain.exceptions import EntityNotFoundError, InvalidReferenceError


class StudentService:
    """Orchestrates student CRUD logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: StudentRepository,
        agent_repository: AgentRepository,
        university_repository: UniversityRepository,
        program_repository: ProgramRepository,
    ):
        self._repository = repository
        self._agents = agent_repository
        self._universities = university_repository
        self._programs = program_repository

    async def get_student(self, student_id: int) -> Student:
        student = await self._repository.get_by_id(student_id)
        if student is None:
            raise EntityNotFoundError("Student", student_id)
        return student

    async def get_student_detail(self, student_id: int) -> Student:
        """Fetch a student with numeric agent/university/program references replaced by names."""
        student = await self.get_student(student_id)

        if student.agent and student.agent.isdigit():
            agent = await self._agents.get_by_id(int(student.agent))
            if agent is not None:
                student.agent = agent.name
        if student.university and student.university.isdigit():
            university = await self._universities.get_by_id(int(student.university))
            if university is not None:
                student.university = university.name
        if student.program and student.program.isdigit():
            program = await self._programs.get_by_id(int(student.program))
            if program is not None:
                student.program = program.name
        return student

    async def list_students(self, skip: int = 0, limit: int = 1000) -> list[Student]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def list_by_stage(self, stage: str) -> list[Student]:
        return await self._repository.get_by_stage(stage)

    async def create_student(self, data: StudentCreate) -> Student:
        student = Student(**data.model_dump())
        return await self._repository.create(student)

    async def update_student(self, student_id: int, data: StudentUpdate) -> Student:
        student = await self.get_student(student_id)

        changes = data.model_dump(exclude_unset=True)
        agent_id = changes.pop("agent_id", None)
        if agent_id is not None:
            agent = await self._agents.get_by_id(agent_id)
            if agent is None:
                raise InvalidReferenceError("agentId", "Agent", agent_id)
            changes["agent"] = agent.name

        student.update(changes)
        return await self._repository.update(student)

    async def delete_student(self, student_id: int) -> bool:
        exists = await self._repository.get_by_id(student_id)
        if exists is None:
            raise EntityNotFoundError("Student", student_id)
        return await self._repository.delete(student_id)
