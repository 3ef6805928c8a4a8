"""Pydantic DTOs for student cards."""

from datetime import date, datetime

from pydantic import Field, field_validator

from intered.domain.entities import CardPlan, CardStatus

from .base import CamelModel


class CardCreate(CamelModel):
    student_id: int = Field(..., gt=0)
    card_number: str = Field(..., min_length=1, max_length=32, examples=["20231234567890"])
    plan: CardPlan = CardPlan.STANDARD
    issue_date: date = Field(default_factory=date.today)
    expiry_date: date
    status: CardStatus = CardStatus.ACTIVE

    @field_validator("card_number")
    @classmethod
    def _strip_card_number(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Card number is required")
        return value


class CardResponse(CamelModel):
    id: int
    student_id: int
    card_number: str
    plan: CardPlan
    issue_date: date
    expiry_date: date
    status: CardStatus
    created_at: datetime | None = None
