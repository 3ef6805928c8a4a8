"""HTTP request helper: JSON in, JSON out, session cookie preserved between calls."""

import logging
from typing import Any, Literal

import httpx

from .errors import ApiRequestError

logger = logging.getLogger(__name__)

On401 = Literal["throw", "return_none"]


class ApiClient:
    """Thin wrapper around httpx.AsyncClient for the dashboard's REST API.

    The underlying client keeps the session cookie set by login, so every
    later request is authenticated. Tests inject an ``http_client`` built
    on ``httpx.MockTransport`` or ``httpx.ASGITransport``.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def request(
        self,
        method: str,
        url: str,
        data: Any = None,
        *,
        on401: On401 = "throw",
    ) -> Any:
        """Send a JSON request and return the decoded body.

        Returns None for empty bodies (e.g. 204) and, when ``on401`` is
        "return_none", for 401 responses. Any other non-2xx raises
        ApiRequestError carrying the server's message.
        """
        kwargs: dict[str, Any] = {}
        if data is not None:
            kwargs["json"] = data

        try:
            response = await self._http_client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiRequestError(0, f"Network error: {e}") from e

        return self._handle(method, url, response, on401)

    async def get(self, url: str, *, on401: On401 = "throw") -> Any:
        return await self.request("GET", url, on401=on401)

    async def upload(
        self,
        url: str,
        filename: str,
        content: bytes,
        *,
        field: str = "file",
        content_type: str | None = None,
    ) -> Any:
        """POST a multipart/form-data upload with a single file field."""
        file_tuple = (filename, content, content_type) if content_type else (filename, content)
        try:
            response = await self._http_client.post(url, files={field: file_tuple})
        except httpx.HTTPError as e:
            logger.warning("POST %s upload failed: %s", url, e)
            raise ApiRequestError(0, f"Network error: {e}") from e
        return self._handle("POST", url, response, "throw")

    def _handle(self, method: str, url: str, response: httpx.Response, on401: On401) -> Any:
        if response.status_code == 401 and on401 == "return_none":
            return None
        if response.is_error:
            raise self._error_from(response)

        logger.debug("%s %s → %d", method, url, response.status_code)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _error_from(response: httpx.Response) -> ApiRequestError:
        """Build an ApiRequestError from a non-2xx httpx Response."""
        message = ""
        try:
            data = response.json()
            if isinstance(data, dict):
                value = data.get("message") or data.get("detail")
                message = value if isinstance(value, str) else ""
        except ValueError:
            pass
        if not message:
            message = response.text.strip()
        if not message:
            message = f"API request failed: {response.reason_phrase or response.status_code}"
        return ApiRequestError(response.status_code, message)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
