"""Domain entity: a scheduled meeting, session or workshop."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from .enums import EventStatus, EventType


@dataclass
class Event:
    """A calendar event, optionally tied to one student."""

    title: str
    event_date: date
    event_type: EventType = EventType.COUNSELING
    student_id: int | None = None
    description: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    status: EventStatus = EventStatus.SCHEDULED
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))
