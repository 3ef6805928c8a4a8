"""Domain entity: a student benefits card."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from .enums import CardPlan, CardStatus


@dataclass
class Card:
    student_id: int
    card_number: str
    issue_date: date
    expiry_date: date
    plan: CardPlan = CardPlan.STANDARD
    status: CardStatus = CardStatus.ACTIVE
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))
