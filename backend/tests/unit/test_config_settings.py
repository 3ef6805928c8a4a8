"""Unit tests for application and client settings."""

import logging
from pathlib import Path

from intered.client.config import ClientSettings
from intered.config import Settings
from intered.infrastructure.database.session import get_async_url
from intered.infrastructure.logging.log_config import setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_default_seed_file_exists():
    assert Path(Settings().seed_file).is_file()


def test_async_driver_urls():
    assert get_async_url("sqlite:///./local.db") == "sqlite+aiosqlite:///./local.db"
    assert get_async_url("postgresql://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"
    assert get_async_url("postgresql+asyncpg://u:p@h/db") == "postgresql+asyncpg://u:p@h/db"


def test_client_settings_from_environment(monkeypatch):
    monkeypatch.setenv("INTERED_CLIENT_API_BASE_URL", "http://api.internal:8080")
    monkeypatch.setenv("INTERED_CLIENT_STALE_TIME", "12.5")
    settings = ClientSettings()
    assert settings.api_base_url == "http://api.internal:8080"
    assert settings.stale_time == 12.5
    assert settings.query_retry == 1


def test_setup_logging_applies_category_levels():
    settings = Settings(log_level_sql="DEBUG", log_level_client="not-a-level")
    applied = setup_logging(settings)

    assert applied["log_level_sql"] == logging.DEBUG
    assert applied["log_level_client"] == logging.INFO
    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG
    assert logging.getLogger("intered.client").level == logging.INFO
