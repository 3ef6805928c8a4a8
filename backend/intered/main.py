"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intered.config import get_settings
from intered.infrastructure.database import async_session_factory, create_schema, engine
from intered.infrastructure.database.repositories import (
    SQLAlchemyAgentRepository,
    SQLAlchemyProgramRepository,
    SQLAlchemyStudentRepository,
    SQLAlchemyUniversityRepository,
    SQLAlchemyUserRepository,
)
from intered.application.services import DemoDataSeeder
from intered.infrastructure.logging.log_config import setup_logging
from intered.infrastructure.security import WerkzeugPasswordHasher
from intered.presentation.api.errors import register_exception_handlers
from intered.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Connects to the default ``postgres`` maintenance database, checks for the
    target database name, and issues ``CREATE DATABASE`` when missing.
    SQLite URLs are left alone.
    """
    from urllib.parse import urlparse

    settings = get_settings()
    if not settings.database_url.startswith("postgresql"):
        return

    import asyncpg

    parsed = urlparse(settings.database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


async def _seed_demo_data() -> None:
    """Load the YAML demo data into empty tables."""
    settings = get_settings()
    try:
        async with async_session_factory() as session:
            seeder = DemoDataSeeder(
                seed_file=settings.seed_file,
                user_repository=SQLAlchemyUserRepository(session),
                university_repository=SQLAlchemyUniversityRepository(session),
                program_repository=SQLAlchemyProgramRepository(session),
                agent_repository=SQLAlchemyAgentRepository(session),
                student_repository=SQLAlchemyStudentRepository(session),
                hasher=WerkzeugPasswordHasher(),
            )
            await seeder.seed()
            await session.commit()
    except Exception:
        logger.exception("Failed to seed demo data, continuing without it")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: create tables and seed demo data."""
    settings = get_settings()
    setup_logging()

    # 0. Ensure the PostgreSQL database exists (auto-create if missing)
    await _ensure_database_exists()

    # 1. Create all database tables
    await create_schema()

    # 2. Seed demo accounts, universities, agents and students
    if settings.seed_demo_data:
        await _seed_demo_data()

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)
    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Credentials are required for the session cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "intered.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
    )
