"""Abstract repository interface (port) for Application persistence."""

from abc import abstractmethod

from intered.domain.entities import Application

from .crud_repository import CrudRepository


class ApplicationRepository(CrudRepository[Application]):
    """Port for application persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_filtered(
        self,
        *,
        stage: str | None = None,
        student_id: int | None = None,
        university_id: int | None = None,
        program_id: int | None = None,
    ) -> list[Application]:
        """Retrieve applications matching every given criterion."""
        ...

    @abstractmethod
    async def count_by_stage(self) -> dict[str, int]:
        """Map each stage that has applications to its application count."""
        ...
