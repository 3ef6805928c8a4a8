"""Pydantic DTOs for authentication and user accounts."""

from datetime import datetime

from pydantic import Field

from intered.domain.entities import UserRole

from .base import CamelModel


class UserCreate(CamelModel):
    """Registration payload."""

    username: str = Field(..., min_length=3, max_length=64, examples=["jdoe"])
    password: str = Field(..., min_length=6, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=255, examples=["Jane Doe"])
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    role: UserRole = UserRole.STAFF


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """User as returned to the client: the password hash is never included."""

    id: int
    username: str
    full_name: str
    email: str
    role: UserRole
    created_at: datetime | None = None


class MessageResponse(CamelModel):
    message: str
