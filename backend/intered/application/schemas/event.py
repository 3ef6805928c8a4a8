"""Pydantic DTOs for scheduled events."""

from datetime import date, datetime

from pydantic import Field, field_validator

from intered.domain.entities import EventStatus, EventType

from .base import CamelModel, blank_to_none

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class EventCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255, examples=["Counseling Session"])
    event_date: date
    event_type: EventType = EventType.COUNSELING
    student_id: int | None = Field(None, gt=0)
    description: str | None = None
    start_time: str | None = Field(None, pattern=_TIME_PATTERN)
    end_time: str | None = Field(None, pattern=_TIME_PATTERN)
    status: EventStatus = EventStatus.SCHEDULED

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Event title is required")
        return value

    @field_validator("student_id", "description", "start_time", "end_time", mode="before")
    @classmethod
    def _clear_placeholders(cls, value):
        return blank_to_none(value)


class EventResponse(CamelModel):
    id: int
    title: str
    event_date: date
    event_type: EventType
    student_id: int | None = None
    description: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    status: EventStatus
    created_at: datetime | None = None
