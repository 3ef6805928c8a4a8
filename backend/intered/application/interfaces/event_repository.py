"""Abstract repository interface (port) for scheduled events."""

from abc import ABC, abstractmethod

from intered.domain.entities import Event


class EventRepository(ABC):
    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[Event]:
        """Retrieve events ordered by date."""
        ...

    @abstractmethod
    async def get_by_student(self, student_id: int) -> list[Event]:
        ...

    @abstractmethod
    async def create(self, event: Event) -> Event:
        ...
