"""Register, login, current user and logout over the session cookie."""

import pytest

NEW_USER = {
    "username": "jdoe",
    "password": "secret123",
    "fullName": "Jane Doe",
    "email": "jane@intered.com",
}


@pytest.mark.asyncio
async def test_current_user_requires_session(client):
    response = await client.get("/api/auth/current-user")
    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}


@pytest.mark.asyncio
async def test_register_starts_session(client):
    response = await client.post("/api/auth/register", json=NEW_USER)

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "jdoe"
    assert "password" not in body and "passwordHash" not in body

    me = await client.get("/api/auth/current-user")
    assert me.status_code == 200
    assert me.json()["fullName"] == "Jane Doe"


@pytest.mark.asyncio
async def test_duplicate_username_conflicts(client):
    await client.post("/api/auth/register", json=NEW_USER)
    response = await client.post("/api/auth/register", json=NEW_USER)
    assert response.status_code == 409
    assert response.json()["message"] == "Username already exists"


@pytest.mark.asyncio
async def test_login_and_logout(client):
    await client.post("/api/auth/register", json=NEW_USER)
    await client.get("/api/auth/logout")
    assert (await client.get("/api/auth/current-user")).status_code == 401

    bad = await client.post("/api/auth/login", json={"username": "jdoe", "password": "nope"})
    assert bad.status_code == 401
    assert bad.json()["message"] == "Invalid credentials"

    good = await client.post("/api/auth/login", json={"username": "jdoe", "password": "secret123"})
    assert good.status_code == 200
    assert (await client.get("/api/auth/current-user")).json()["username"] == "jdoe"


@pytest.mark.asyncio
async def test_tampered_cookie_rejected(client):
    client.cookies.set("intered_session", "1.forged")
    response = await client.get("/api/auth/current-user")
    assert response.status_code == 401
