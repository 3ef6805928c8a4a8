"""SQLAlchemy repository for student cards."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from intered.application.interfaces import CardRepository
from intered.domain.entities import Card, CardPlan, CardStatus
from intered.infrastructure.database.models import CardModel


class SQLAlchemyCardRepository(CardRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CardModel) -> Card:
        return Card(
            id=model.id,
            student_id=model.student_id,
            card_number=model.card_number,
            plan=CardPlan(model.plan),
            issue_date=model.issue_date,
            expiry_date=model.expiry_date,
            status=CardStatus(model.status),
            created_at=model.created_at,
        )

    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[Card]:
        stmt = select(CardModel).order_by(CardModel.id).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_student(self, student_id: int) -> list[Card]:
        stmt = select(CardModel).where(CardModel.student_id == student_id).order_by(CardModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_card_number(self, card_number: str) -> Card | None:
        stmt = select(CardModel).where(CardModel.card_number == card_number)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, card: Card) -> Card:
        model = CardModel(
            student_id=card.student_id,
            card_number=card.card_number,
            plan=card.plan.value,
            issue_date=card.issue_date,
            expiry_date=card.expiry_date,
            status=card.status.value,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
