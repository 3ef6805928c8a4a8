"""Dashboard client settings: kept apart from the server's Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Client-side settings, read from INTERED_CLIENT_* environment variables."""

    api_base_url: str = "http://localhost:5000"
    stale_time: float = 300.0            # seconds a fetched query counts as fresh
    query_retry: int = 1                 # extra attempts for a failed query
    request_timeout: float = 30.0

    model_config = {
        "env_prefix": "INTERED_CLIENT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()
