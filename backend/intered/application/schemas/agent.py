"""Pydantic DTOs for recruitment agents."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from intered.domain.entities import AgentStatus

from .base import CamelModel, PartialUpdate


class AgentCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Global Pathways"])
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    company: str | None = None
    phone: str | None = None
    country: str | None = None
    status: AgentStatus = AgentStatus.ACTIVE
    is_featured: bool = False


class AgentUpdate(PartialUpdate):
    """Partial update: used for PUT, PATCH and the featured toggle."""

    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "email", "status", "is_featured"})

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    company: str | None = None
    phone: str | None = None
    country: str | None = None
    status: AgentStatus | None = None
    is_featured: bool | None = None


class AgentResponse(CamelModel):
    id: int
    name: str
    email: str
    company: str | None = None
    phone: str | None = None
    country: str | None = None
    status: AgentStatus
    is_featured: bool = False
    created_at: datetime | None = None
