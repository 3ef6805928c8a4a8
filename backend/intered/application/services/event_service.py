"""Application service (use case) for scheduling events."""

from intered.application.interfaces import EventRepository, StudentRepository
from intered.application.schemas import EventCreate
from intered.domain.entities import Event
from intered.domain.exceptions import InvalidReferenceError


class EventService:
    def __init__(self, repository: EventRepository, student_repository: StudentRepository):
        self._repository = repository
        self._students = student_repository

    async def list_events(self) -> list[Event]:
        return await self._repository.get_all()

    async def list_for_student(self, student_id: int) -> list[Event]:
        return await self._repository.get_by_student(student_id)

    async def schedule_event(self, data: EventCreate) -> Event:
        if data.student_id is not None and await self._students.get_by_id(data.student_id) is None:
            raise InvalidReferenceError("studentId", "Student", data.student_id)
        return await self._repository.create(Event(**data.model_dump()))
