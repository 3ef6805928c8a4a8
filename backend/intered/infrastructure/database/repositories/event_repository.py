"""SQLAlchemy repository for scheduled events."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from intered.application.interfaces import EventRepository
from intered.domain.entities import Event, EventStatus, EventType
from intered.infrastructure.database.models import EventModel


class SQLAlchemyEventRepository(EventRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: EventModel) -> Event:
        return Event(
            id=model.id,
            title=model.title,
            event_date=model.event_date,
            event_type=EventType(model.event_type),
            student_id=model.student_id,
            description=model.description,
            start_time=model.start_time,
            end_time=model.end_time,
            status=EventStatus(model.status),
            created_at=model.created_at,
        )

    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[Event]:
        stmt = (
            select(EventModel)
            .order_by(EventModel.event_date, EventModel.start_time, EventModel.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_by_student(self, student_id: int) -> list[Event]:
        stmt = (
            select(EventModel)
            .where(EventModel.student_id == student_id)
            .order_by(EventModel.event_date, EventModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, event: Event) -> Event:
        model = EventModel(
            title=event.title,
            event_date=event.event_date,
            event_type=event.event_type.value,
            student_id=event.student_id,
            description=event.description,
            start_time=event.start_time,
            end_time=event.end_time,
            status=event.status.value,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
