"""Unit tests for registration, login and the session helpers."""

import pytest

from fakes import FakeUserRepository, PlainHasher
from intered.application.schemas import UserCreate
from intered.application.services import AuthService
from intered.domain.exceptions import AuthenticationError, DuplicateEntityError
from intered.infrastructure.security import SessionSigner, WerkzeugPasswordHasher


@pytest.fixture
def service() -> AuthService:
    return AuthService(FakeUserRepository(), PlainHasher())


def _user(username: str = "jdoe") -> UserCreate:
    return UserCreate(username=username, password="secret1", full_name="Jane Doe", email="jane@example.com")


@pytest.mark.asyncio
async def test_register_stores_hashed_password(service: AuthService):
    user = await service.register(_user())
    assert user.id is not None
    assert user.password == "plain$secret1"
    assert user.role.value == "staff"


@pytest.mark.asyncio
async def test_register_duplicate_username(service: AuthService):
    await service.register(_user())
    with pytest.raises(DuplicateEntityError):
        await service.register(_user())


@pytest.mark.asyncio
async def test_authenticate(service: AuthService):
    created = await service.register(_user())
    user = await service.authenticate("jdoe", "secret1")
    assert user.id == created.id


@pytest.mark.asyncio
@pytest.mark.parametrize("username,password", [("jdoe", "wrong"), ("nobody", "secret1")])
async def test_authenticate_rejects_bad_credentials(service: AuthService, username, password):
    await service.register(_user())
    with pytest.raises(AuthenticationError) as exc_info:
        await service.authenticate(username, password)
    assert exc_info.value.message == "Invalid credentials"


def test_werkzeug_hasher_round_trip():
    hasher = WerkzeugPasswordHasher()
    hashed = hasher.hash("admin123")
    assert hashed != "admin123"
    assert hasher.verify("admin123", hashed)
    assert not hasher.verify("admin124", hashed)


def test_session_signer():
    signer = SessionSigner("secret", max_age=60)
    token = signer.sign(7)
    assert signer.unsign(token) == 7
    assert signer.unsign(token + "x") is None
    assert signer.unsign(None) is None
    assert SessionSigner("other-secret", max_age=60).unsign(token) is None


def test_session_signer_expiry():
    signer = SessionSigner("secret", max_age=-1)
    assert signer.unsign(signer.sign(7)) is None
