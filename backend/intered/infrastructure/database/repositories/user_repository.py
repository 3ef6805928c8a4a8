"""Concrete repository implementation for User accounts backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from intered.application.interfaces import UserRepository
from intered.domain.entities import User, UserRole
from intered.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            password=model.password,
            full_name=model.full_name,
            email=model.email,
            role=UserRole(model.role),
            created_at=model.created_at,
        )

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            password=user.password,
            full_name=user.full_name,
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(UserModel.id)))
        return result.scalar_one()
