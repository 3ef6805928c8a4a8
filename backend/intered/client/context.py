"""Application root: owns the HTTP client, the query cache, toasts and auth.

There is no module-level singleton: each app root (and each test) builds
its own AppContext and passes it to hooks, dialogs and pages.
"""

import logging

import httpx

from .auth import AuthContext
from .config import ClientSettings, get_client_settings
from .http import ApiClient
from .notifications import ToastCenter
from .query_client import QueryClient

logger = logging.getLogger(__name__)


class AppContext:
    def __init__(
        self,
        api: ApiClient,
        *,
        settings: ClientSettings | None = None,
        toasts: ToastCenter | None = None,
        with_auth: bool = True,
    ):
        self.settings = settings or get_client_settings()
        self.api = api
        self.toasts = toasts or ToastCenter()
        self.query_client = QueryClient(
            api,
            stale_time=self.settings.stale_time,
            retry=self.settings.query_retry,
        )
        self.auth: AuthContext | None = AuthContext(api, self.toasts) if with_auth else None

    @classmethod
    def create(
        cls,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        with_auth: bool = True,
    ) -> "AppContext":
        settings = settings or get_client_settings()
        api = ApiClient(
            settings.api_base_url,
            http_client=http_client,
            timeout=settings.request_timeout,
        )
        return cls(api, settings=settings, with_auth=with_auth)

    async def init(self) -> "AppContext":
        if self.auth is not None:
            await self.auth.init()
        logger.debug("App context ready (auth=%s)", self.auth is not None)
        return self

    async def teardown(self) -> None:
        self.query_client.clear()
        await self.api.aclose()

    async def __aenter__(self) -> "AppContext":
        return await self.init()

    async def __aexit__(self, *exc_info: object) -> None:
        await self.teardown()
