"""Pydantic DTOs for student applications."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, field_validator

from intered.domain.entities import ApplicationStage, ApplicationStatus

from .base import CamelModel, PartialUpdate, blank_to_none

_OPTIONAL_FIELDS = (
    "agent_id",
    "intake_date",
    "application_date",
    "decision_date",
    "notes",
)


class ApplicationCreate(CamelModel):
    """Schema for creating an application. Ids may arrive as numeric strings from forms."""

    student_id: int = Field(..., gt=0)
    university_id: int = Field(..., gt=0)
    program_id: int = Field(..., gt=0)
    agent_id: int | None = Field(None, gt=0)
    stage: ApplicationStage = ApplicationStage.DOCUMENT_COLLECTION
    status: ApplicationStatus = ApplicationStatus.IN_PROGRESS
    intake_date: datetime | None = None
    application_date: datetime | None = None
    decision_date: datetime | None = None
    notes: str | None = None
    is_high_priority: bool = False

    @field_validator(*_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _clear_placeholders(cls, value):
        return blank_to_none(value)


class ApplicationUpdate(PartialUpdate):
    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"student_id", "university_id", "program_id", "stage", "status", "is_high_priority"}
    )

    student_id: int | None = Field(None, gt=0)
    university_id: int | None = Field(None, gt=0)
    program_id: int | None = Field(None, gt=0)
    agent_id: int | None = Field(None, gt=0)
    stage: ApplicationStage | None = None
    status: ApplicationStatus | None = None
    intake_date: datetime | None = None
    application_date: datetime | None = None
    decision_date: datetime | None = None
    notes: str | None = None
    is_high_priority: bool | None = None

    @field_validator(*_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _clear_placeholders(cls, value):
        return blank_to_none(value)


class ApplicationResponse(CamelModel):
    id: int
    student_id: int
    university_id: int
    program_id: int
    agent_id: int | None = None
    stage: ApplicationStage
    status: ApplicationStatus
    intake_date: datetime | None = None
    application_date: datetime | None = None
    decision_date: datetime | None = None
    notes: str | None = None
    is_high_priority: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StudentApplicationResponse(ApplicationResponse):
    """Application enriched with display names for the student detail view."""

    university_name: str | None = None
    program_name: str | None = None
