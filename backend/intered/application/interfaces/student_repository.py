"""Abstract repository interface (port) for Student persistence."""

from abc import abstractmethod

from intered.domain.entities import Student

from .crud_repository import CrudRepository


class StudentRepository(CrudRepository[Student]):
    """Port for student persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_stage(self, stage: str) -> list[Student]:
        """Retrieve all students currently in the given journey stage."""
        ...

    @abstractmethod
    async def get_existing_emails(self) -> set[str]:
        """Return every stored student email, lower-cased."""
        ...

    @abstractmethod
    async def count_by_stage(self) -> dict[str, int]:
        """Map each stage that has students to its student count."""
        ...
