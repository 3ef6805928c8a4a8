"""Shared fixtures: a fresh schema per test and an httpx client bound to the app."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from intered.infrastructure.database import create_schema, engine
from intered.main import create_app


@pytest_asyncio.fixture
async def app():
    await create_schema(reset=True)
    yield create_app()
    await engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
