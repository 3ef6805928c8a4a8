"""Abstract repository interfaces (ports) for universities and programs."""

from abc import ABC, abstractmethod

from intered.domain.entities import Program, University

from .crud_repository import CrudRepository


class UniversityRepository(CrudRepository[University]):
    """Port for university persistence."""


class ProgramRepository(ABC):
    """Port for program persistence."""

    @abstractmethod
    async def get_by_id(self, program_id: int) -> Program | None:
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[Program]:
        ...

    @abstractmethod
    async def get_by_university(self, university_id: int) -> list[Program]:
        """Retrieve the programs offered by one university."""
        ...

    @abstractmethod
    async def create(self, program: Program) -> Program:
        ...
