"""Top-level API router: aggregates every endpoint router under /api."""

from fastapi import APIRouter

from intered.presentation.api.endpoints.health import router as health_router
from intered.presentation.api.endpoints.auth import router as auth_router
from intered.presentation.api.endpoints.students import router as students_router
from intered.presentation.api.endpoints.universities import router as universities_router
from intered.presentation.api.endpoints.programs import router as programs_router
from intered.presentation.api.endpoints.agents import router as agents_router
from intered.presentation.api.endpoints.applications import router as applications_router
from intered.presentation.api.endpoints.cards import router as cards_router
from intered.presentation.api.endpoints.events import router as events_router
from intered.presentation.api.endpoints.stats import router as stats_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(students_router)
router.include_router(universities_router)
router.include_router(programs_router)
router.include_router(agents_router)
router.include_router(applications_router)
router.include_router(cards_router)
router.include_router(events_router)
router.include_router(stats_router)
