"""Application service (use case) for issuing student cards."""

import logging

from intered.application.interfaces import CardRepository, StudentRepository
from intered.application.schemas import CardCreate
from intered.domain.entities import Card
from intered.domain.exceptions import DuplicateEntityError, InvalidReferenceError

logger = logging.getLogger(__name__)


class CardService:
    def __init__(self, repository: CardRepository, student_repository: StudentRepository):
        self._repository = repository
        self._students = student_repository

    async def list_cards(self) -> list[Card]:
        return await self._repository.get_all()

    async def list_for_student(self, student_id: int) -> list[Card]:
        return await self._repository.get_by_student(student_id)

    async def issue_card(self, data: CardCreate) -> Card:
        if await self._students.get_by_id(data.student_id) is None:
            raise InvalidReferenceError("studentId", "Student", data.student_id)
        if await self._repository.get_by_card_number(data.card_number) is not None:
            raise DuplicateEntityError("Card", "cardNumber", data.card_number)

        card = await self._repository.create(Card(**data.model_dump()))
        logger.info("Issued %s card %s to student %s", card.plan.value, card.card_number, card.student_id)
        return card
