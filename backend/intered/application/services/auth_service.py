"""Application service (use case) for registration and login."""

import logging

from intered.application.interfaces import PasswordHasher, UserRepository
from intered.application.schemas import UserCreate
from intered.domain.entities import User
from intered.domain.exceptions import (
    AuthenticationError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Registers accounts and verifies credentials. Session handling lives in the API layer."""

    def __init__(self, repository: UserRepository, hasher: PasswordHasher):
        self._repository = repository
        self._hasher = hasher

    async def register(self, data: UserCreate) -> User:
        existing = await self._repository.get_by_username(data.username)
        if existing is not None:
            raise DuplicateEntityError("User", "username", data.username)

        user = User(
            username=data.username,
            password=self._hasher.hash(data.password),
            full_name=data.full_name,
            email=data.email,
            role=data.role,
        )
        created = await self._repository.create(user)
        logger.info("Registered user '%s' (role=%s)", created.username, created.role.value)
        return created

    async def authenticate(self, username: str, password: str) -> User:
        """Return the user for valid credentials.

        Unknown usernames and wrong passwords raise the same error so the
        response does not reveal which accounts exist.
        """
        user = await self._repository.get_by_username(username)
        if user is None or not self._hasher.verify(password, user.password):
            logger.info("Rejected login for '%s'", username)
            raise AuthenticationError("Invalid credentials")
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user
