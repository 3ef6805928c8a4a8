"""Domain entity: a student's application to a university program."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .enums import ApplicationStage, ApplicationStatus


@dataclass
class Application:
    """Links a student to a university program, optionally via an agent.

    Every foreign key must resolve; the service layer checks this before
    anything reaches the repository.
    """

    student_id: int
    university_id: int
    program_id: int
    agent_id: int | None = None
    stage: ApplicationStage = ApplicationStage.DOCUMENT_COLLECTION
    status: ApplicationStatus = ApplicationStatus.IN_PROGRESS
    intake_date: datetime | None = None
    application_date: datetime | None = None
    decision_date: datetime | None = None
    notes: str | None = None
    is_high_priority: bool = False
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, changes: dict[str, Any]) -> None:
        """Apply a partial update and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name in ("id", "created_at", "updated_at"):
                continue
            if hasattr(self, name):
                setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
