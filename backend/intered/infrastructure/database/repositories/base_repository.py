"""Shared SQLAlchemy plumbing for the integer-keyed CRUD repositories."""

from dataclasses import fields
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from intered.infrastructure.database.base import Base

E = TypeVar("E")
M = TypeVar("M", bound=Base)

_IMMUTABLE = ("id", "created_at")


def _plain(value: Any) -> Any:
    """Enums are stored by value."""
    return value.value if isinstance(value, Enum) else value


class SQLAlchemyCrudRepository(Generic[E, M]):
    """Generic get/list/create/update/delete over one ORM model.

    Subclasses set ``_model`` and implement ``_to_entity``; entity dataclass
    fields and model columns share names, so ``_to_model`` is generic.
    """

    _model: type[M]

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: M) -> E:
        raise NotImplementedError

    def _to_model(self, entity: E) -> M:
        values = {f.name: _plain(getattr(entity, f.name)) for f in fields(entity)}
        if values.get("id") is None:
            values.pop("id", None)
        if values.get("created_at") is None:
            values.pop("created_at", None)
        return self._model(**values)

    async def get_by_id(self, entity_id: int) -> E | None:
        result = await self._session.get(self._model, entity_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int = 1000) -> list[E]:
        stmt = select(self._model).order_by(self._model.id).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, entity: E) -> E:
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: E) -> E:
        model = await self._session.get(self._model, entity.id)
        if model is None:
            raise ValueError(f"{self._model.__name__} {entity.id} not found in database")
        for f in fields(entity):
            if f.name in _IMMUTABLE:
                continue
            setattr(model, f.name, _plain(getattr(entity, f.name)))
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, entity_id: int) -> bool:
        model = await self._session.get(self._model, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
