"""Domain entities: partner universities and the programs they offer."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .enums import UniversityStatus, UniversityTier


@dataclass
class University:
    """A partner institution, including its agreement terms with the agency."""

    name: str
    country: str
    city: str | None = None
    province: str | None = None
    tier: UniversityTier = UniversityTier.TIER3
    status: UniversityStatus = UniversityStatus.ACTIVE
    website: str | None = None
    logo: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    agreement_status: str | None = "none"
    agreement_date: datetime | None = None
    agreement_expiry: datetime | None = None
    commission_rate: float | None = None
    notes: str | None = None
    tags: list[str] = field(default_factory=list)
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def update(self, changes: dict[str, Any]) -> None:
        """Apply a partial update and stamp updated_at."""
        for name, value in changes.items():
            if name in ("id", "created_at", "updated_at"):
                continue
            if hasattr(self, name):
                setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class Program:
    """A course of study offered by a university."""

    name: str
    university_id: int
    level: str
    duration: str | None = None
    tuition_fee: str | None = None
    start_date: str | None = None
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))
