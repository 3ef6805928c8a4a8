"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from intered.config import get_settings
from intered.application.services import (
    AgentService,
    ApplicationService,
    AuthService,
    CardService,
    EventService,
    StatsService,
    StudentImportService,
    StudentService,
    UniversityService,
)
from intered.domain.entities import User
from intered.domain.exceptions import EntityNotFoundError
from intered.infrastructure.database.session import get_db_session
from intered.infrastructure.database.repositories import (
    SQLAlchemyAgentRepository,
    SQLAlchemyApplicationRepository,
    SQLAlchemyCardRepository,
    SQLAlchemyEventRepository,
    SQLAlchemyProgramRepository,
    SQLAlchemyStudentRepository,
    SQLAlchemyUniversityRepository,
    SQLAlchemyUserRepository,
)
from intered.infrastructure.extractors.spreadsheet_row_reader import SpreadsheetRowReader
from intered.infrastructure.security import SessionSigner, WerkzeugPasswordHasher


@lru_cache
def get_session_signer() -> SessionSigner:
    """Singleton signer built from the session settings."""
    settings = get_settings()
    return SessionSigner(settings.session_secret, max_age=settings.session_max_age)


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AuthService, None]:
    yield AuthService(SQLAlchemyUserRepository(session), WerkzeugPasswordHasher())


async def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
    signer: SessionSigner = Depends(get_session_signer),
) -> User:
    """Resolve the logged-in user from the signed session cookie, else 401."""
    token = request.cookies.get(get_settings().session_cookie_name)
    user_id = signer.unsign(token)
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        return await auth_service.get_user(user_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")


async def get_student_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[StudentService, None]:
    """Provides a StudentService with the repositories it resolves names through."""
    yield StudentService(
        SQLAlchemyStudentRepository(session),
        SQLAlchemyAgentRepository(session),
        SQLAlchemyUniversityRepository(session),
        SQLAlchemyProgramRepository(session),
    )


async def get_student_import_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[StudentImportService, None]:
    settings = get_settings()
    yield StudentImportService(
        SQLAlchemyStudentRepository(session),
        SpreadsheetRowReader(),
        max_rows=settings.max_import_rows,
    )


async def get_university_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UniversityService, None]:
    yield UniversityService(
        SQLAlchemyUniversityRepository(session),
        SQLAlchemyProgramRepository(session),
    )


async def get_agent_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AgentService, None]:
    yield AgentService(SQLAlchemyAgentRepository(session))


async def get_application_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ApplicationService, None]:
    """Provides an ApplicationService with every repository its foreign keys point to."""
    yield ApplicationService(
        SQLAlchemyApplicationRepository(session),
        SQLAlchemyStudentRepository(session),
        SQLAlchemyUniversityRepository(session),
        SQLAlchemyProgramRepository(session),
        SQLAlchemyAgentRepository(session),
    )


async def get_card_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CardService, None]:
    yield CardService(SQLAlchemyCardRepository(session), SQLAlchemyStudentRepository(session))


async def get_event_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[EventService, None]:
    yield EventService(SQLAlchemyEventRepository(session), SQLAlchemyStudentRepository(session))


async def get_stats_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[StatsService, None]:
    yield StatsService(
        SQLAlchemyStudentRepository(session),
        SQLAlchemyApplicationRepository(session),
    )
