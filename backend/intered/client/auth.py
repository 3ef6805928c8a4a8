"""Auth context: the logged-in user, shared by every page of one app root.

``login`` and ``register`` never raise: failures come back as False with
``error`` set and a destructive toast shown. ``init`` treats any failure
to load the current user (401, network) as "nobody is logged in".
"""

import logging
from typing import TYPE_CHECKING, Any

from intered.application.schemas import UserResponse

from .errors import ApiRequestError, AuthProviderMissingError
from .http import ApiClient
from .mutations import error_message
from .notifications import ToastCenter

if TYPE_CHECKING:
    from .context import AppContext

logger = logging.getLogger(__name__)


class AuthContext:
    def __init__(self, api: ApiClient, toasts: ToastCenter):
        self._api = api
        self._toasts = toasts
        self.user: UserResponse | None = None
        self.error: str | None = None
        self.is_loading = True
        self._initialized = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    async def init(self) -> UserResponse | None:
        """Hydrate ``user`` from the current session. Runs once; later calls are no-ops."""
        if self._initialized:
            return self.user
        self._initialized = True
        self.is_loading = True
        try:
            payload = await self._api.request("GET", "/api/auth/current-user", on401="return_none")
            self.user = UserResponse.model_validate(payload) if payload else None
        except Exception as e:
            logger.debug("No current user: %s", e)
            self.user = None
        finally:
            self.is_loading = False
        return self.user

    async def login(self, username: str, password: str) -> bool:
        return await self._authenticate(
            "/api/auth/login",
            {"username": username, "password": password},
            success_title="Login successful",
            greeting="Welcome back",
            failure_title="Login failed",
            fallback="Invalid credentials",
        )

    async def register(self, user_data: dict[str, Any]) -> bool:
        return await self._authenticate(
            "/api/auth/register",
            user_data,
            success_title="Registration successful",
            greeting="Welcome",
            failure_title="Registration failed",
            fallback="Could not create account",
        )

    async def logout(self) -> None:
        """End the session. The local user is cleared whatever the server says."""
        self.is_loading = True
        try:
            await self._api.request("GET", "/api/auth/logout")
            self._toasts.success("Logout successful", "You have been logged out.")
        except ApiRequestError as e:
            self._toasts.error("Logout failed", error_message(e, "Failed to logout"))
        finally:
            self.user = None
            self.is_loading = False

    async def _authenticate(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        success_title: str,
        greeting: str,
        failure_title: str,
        fallback: str,
    ) -> bool:
        self.is_loading = True
        self.error = None
        try:
            data = await self._api.request("POST", url, payload)
            if not data:
                raise ApiRequestError(0, "Failed to get user data")
            user = UserResponse.model_validate(data)
        except Exception as e:
            self.user = None
            self.error = error_message(e, fallback)
            self._toasts.error(failure_title, self.error)
            return False
        finally:
            self.is_loading = False

        self.user = user
        self._toasts.success(success_title, f"{greeting}, {user.full_name}!")
        return True


def use_auth(ctx: "AppContext") -> AuthContext:
    """Return the auth context of ``ctx``; fails loudly outside an auth provider."""
    if ctx.auth is None:
        raise AuthProviderMissingError()
    return ctx.auth
