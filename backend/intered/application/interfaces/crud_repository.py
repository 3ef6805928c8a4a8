"""Generic repository port shared by the CRUD-style entities."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

E = TypeVar("E")


class CrudRepository(ABC, Generic[E]):
    """Port for entity persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> E | None:
        """Retrieve a single entity by its ID."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[E]:
        """Retrieve a paginated list of entities."""
        ...

    @abstractmethod
    async def create(self, entity: E) -> E:
        """Persist a new entity and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, entity: E) -> E:
        """Update an existing entity."""
        ...

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete an entity. Returns True if deleted, False if not found."""
        ...
