"""Per-category log levels for the admin API.

``LOG_LEVEL`` sets the root level. The ``LOG_LEVEL_*`` settings override
it for one area each: SQL, outgoing HTTP, uvicorn, student import and the
dashboard client layer.
"""

import logging
import sys

from intered.config import Settings, get_settings

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"

LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_import": (
        "StudentImportService",
        "intered.application.services.student_import_service",
        "intered.infrastructure.extractors",
    ),
    "log_level_client": ("intered.client",),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels; returns the level given to each category."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field, logger_names in LOGGER_CATEGORIES.items():
        level = _parse_level(getattr(settings, field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
        applied[field] = level

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s %s",
        settings.log_level,
        " ".join(f"{field.removeprefix('log_level_')}={logging.getLevelName(level)}"
                 for field, level in applied.items()),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
