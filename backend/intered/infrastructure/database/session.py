"""Async engine for the admin database and the per-request session dependency.

``DATABASE_URL`` may be given in its sync form (``sqlite:///``,
``postgresql://``); the matching async driver is substituted here.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from intered.config import get_settings

from .base import Base

_ASYNC_DRIVERS = {
    "sqlite:///": "sqlite+aiosqlite:///",
    "postgresql://": "postgresql+asyncpg://",
}


def get_async_url(url: str) -> str:
    for sync_prefix, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(sync_prefix):
            return async_prefix + url[len(sync_prefix):]
    return url


settings = get_settings()
database_url = get_async_url(settings.database_url)
is_sqlite = database_url.startswith("sqlite")

engine = create_async_engine(database_url, pool_pre_ping=not is_sqlite)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(reset: bool = False) -> None:
    """Create every registered table; ``reset`` drops them first."""
    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request: committed when the endpoint returns, rolled back on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
