"""Domain entity: a prospective, current or former student."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .enums import StudentStage, StudentStatus


@dataclass
class Student:
    """Core domain entity representing a student moving through the journey pipeline.

    ``program``, ``university`` and ``agent`` are free text: the dashboard stores
    display names rather than foreign keys for students.
    """

    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    status: StudentStatus = StudentStatus.ACTIVE
    stage: StudentStage = StudentStage.INQUIRY
    program: str | None = None
    university: str | None = None
    agent: str | None = None
    nationality: str | None = None
    notes: str | None = None
    is_high_priority: bool = False
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def update(self, changes: dict[str, Any]) -> None:
        """Apply a partial update and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name in ("id", "created_at", "updated_at"):
                continue
            if hasattr(self, name):
                setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
