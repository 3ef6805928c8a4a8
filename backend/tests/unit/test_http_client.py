"""Unit tests for the HTTP request helper."""

import json

import httpx
import pytest

from intered.client.errors import ApiRequestError
from intered.client.http import ApiClient


def _client(handler) -> ApiClient:
    return ApiClient(http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test"))


@pytest.mark.asyncio
async def test_json_round_trip():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 1})

    api = _client(handler)
    assert await api.request("POST", "/api/agents", {"name": "A"}) == {"id": 1}
    assert seen == {"method": "POST", "body": {"name": "A"}}


@pytest.mark.asyncio
async def test_no_content_returns_none():
    api = _client(lambda request: httpx.Response(204))
    assert await api.request("DELETE", "/api/students/1") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response,message",
    [
        (httpx.Response(409, json={"message": "Username already exists"}), "Username already exists"),
        (httpx.Response(404, json={"detail": "Student not found"}), "Student not found"),
        (httpx.Response(502, text="Bad gateway"), "Bad gateway"),
    ],
)
async def test_error_message_extraction(response, message):
    api = _client(lambda request: response)
    with pytest.raises(ApiRequestError) as exc_info:
        await api.get("/api/anything")
    assert exc_info.value.status_code == response.status_code
    assert exc_info.value.message == message


@pytest.mark.asyncio
async def test_empty_error_body_gets_generic_message():
    api = _client(lambda request: httpx.Response(500))
    with pytest.raises(ApiRequestError) as exc_info:
        await api.get("/api/anything")
    assert exc_info.value.message


@pytest.mark.asyncio
async def test_401_can_return_none():
    api = _client(lambda request: httpx.Response(401, json={"message": "Not authenticated"}))
    assert await api.get("/api/auth/current-user", on401="return_none") is None
    with pytest.raises(ApiRequestError):
        await api.get("/api/auth/current-user")


@pytest.mark.asyncio
async def test_network_failure_becomes_status_zero():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    api = _client(handler)
    with pytest.raises(ApiRequestError) as exc_info:
        await api.get("/api/students")
    assert exc_info.value.status_code == 0


@pytest.mark.asyncio
async def test_upload_sends_multipart_file():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        request.read()
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = request.content
        return httpx.Response(200, json={"total": 1})

    api = _client(handler)
    result = await api.upload("/api/students/import", "s.csv", b"email\na@example.com\n", content_type="text/csv")

    assert result == {"total": 1}
    assert seen["content_type"].startswith("multipart/form-data")
    assert b'filename="s.csv"' in seen["body"]


@pytest.mark.asyncio
async def test_cookies_persist_between_calls():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/auth/login":
            return httpx.Response(200, json={}, headers={"set-cookie": "intered_session=abc; Path=/"})
        return httpx.Response(200, json={"cookie": request.headers.get("cookie")})

    api = _client(handler)
    await api.request("POST", "/api/auth/login", {"username": "a", "password": "b"})
    assert (await api.get("/api/auth/current-user"))["cookie"] == "intered_session=abc"
