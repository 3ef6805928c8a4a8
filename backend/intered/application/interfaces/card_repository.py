"""Abstract repository interface (port) for student cards."""

from abc import ABC, abstractmethod

from intered.domain.entities import Card


class CardRepository(ABC):
    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[Card]:
        ...

    @abstractmethod
    async def get_by_student(self, student_id: int) -> list[Card]:
        ...

    @abstractmethod
    async def get_by_card_number(self, card_number: str) -> Card | None:
        ...

    @abstractmethod
    async def create(self, card: Card) -> Card:
        ...
