"""Pydantic DTOs (Data Transfer Objects) for the Student feature."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, field_validator

from intered.domain.entities import StudentStage, StudentStatus

from .base import CamelModel, PartialUpdate, blank_to_none

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class StudentCreate(CamelModel):
    """Schema for creating a new student."""

    first_name: str = Field(..., min_length=1, max_length=100, examples=["Amara"])
    last_name: str = Field(..., min_length=1, max_length=100, examples=["Okafor"])
    email: str = Field(..., pattern=_EMAIL_PATTERN, examples=["amara@example.com"])
    phone: str | None = Field(None, max_length=50)
    status: StudentStatus = StudentStatus.ACTIVE
    stage: StudentStage = StudentStage.INQUIRY
    program: str | None = None
    university: str | None = None
    agent: str | None = None
    nationality: str | None = None
    notes: str | None = None
    is_high_priority: bool = False

    @field_validator("program", "university", "agent", "phone", "nationality", mode="before")
    @classmethod
    def _clear_placeholders(cls, value):
        value = blank_to_none(value)
        return str(value) if isinstance(value, int) else value


class StudentUpdate(PartialUpdate):
    """Schema for updating a student: all fields optional, only sent fields apply.

    ``agent_id`` assigns an agent by id; the service resolves it to the
    agent's display name.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"first_name", "last_name", "email", "status", "stage", "is_high_priority"}
    )

    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, pattern=_EMAIL_PATTERN)
    phone: str | None = None
    status: StudentStatus | None = None
    stage: StudentStage | None = None
    program: str | None = None
    university: str | None = None
    agent: str | None = None
    agent_id: int | None = None
    nationality: str | None = None
    notes: str | None = None
    is_high_priority: bool | None = None

    @field_validator("program", "university", "agent", "phone", "nationality", mode="before")
    @classmethod
    def _clear_placeholders(cls, value):
        value = blank_to_none(value)
        return str(value) if isinstance(value, int) else value


class StudentResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    status: StudentStatus
    stage: StudentStage
    program: str | None = None
    university: str | None = None
    agent: str | None = None
    nationality: str | None = None
    notes: str | None = None
    is_high_priority: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ImportRowError(CamelModel):
    line: int
    message: str


class StudentImportResult(CamelModel):
    """Partition of an import file; the client displays it as-is."""

    total: int = 0
    imported: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)
