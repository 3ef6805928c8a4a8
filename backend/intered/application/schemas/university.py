"""Pydantic DTOs for universities and programs."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, field_validator

from intered.domain.entities import UniversityStatus, UniversityTier

from .base import CamelModel, PartialUpdate, blank_to_none


class UniversityCreate(CamelModel):
    """Schema for creating a new university."""

    name: str = Field(..., min_length=1, max_length=255, examples=["University of Oxford"])
    country: str = Field(..., min_length=1, max_length=100, examples=["United Kingdom"])
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
    commission_rate: float | None = Field(None, ge=0, le=100)
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("agreement_date", "agreement_expiry", "commission_rate", mode="before")
    @classmethod
    def _clear_placeholders(cls, value):
        return blank_to_none(value)


class UniversityUpdate(PartialUpdate):
    """Partial update: only fields present in the request body are applied."""

    non_nullable: ClassVar[frozenset[str]] = frozenset({"name", "country", "tier", "status", "tags"})

    name: str | None = Field(None, min_length=1, max_length=255)
    country: str | None = Field(None, min_length=1, max_length=100)
    city: str | None = None
    province: str | None = None
    tier: UniversityTier | None = None
    status: UniversityStatus | None = None
    website: str | None = None
    logo: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    agreement_status: str | None = None
    agreement_date: datetime | None = None
    agreement_expiry: datetime | None = None
    commission_rate: float | None = Field(None, ge=0, le=100)
    notes: str | None = None
    tags: list[str] | None = None

    @field_validator("agreement_date", "agreement_expiry", "commission_rate", mode="before")
    @classmethod
    def _clear_placeholders(cls, value):
        return blank_to_none(value)


class UniversityResponse(CamelModel):
    id: int
    name: str
    country: str
    city: str | None = None
    province: str | None = None
    tier: UniversityTier
    status: UniversityStatus
    website: str | None = None
    logo: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    agreement_status: str | None = None
    agreement_date: datetime | None = None
    agreement_expiry: datetime | None = None
    commission_rate: float | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProgramCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["MSc Computer Science"])
    university_id: int = Field(..., gt=0)
    level: str = Field(..., min_length=1, max_length=50, examples=["Masters"])
    duration: str | None = None
    tuition_fee: str | None = None
    start_date: str | None = None


class ProgramResponse(CamelModel):
    id: int
    name: str
    university_id: int
    level: str
    duration: str | None = None
    tuition_fee: str | None = None
    start_date: str | None = None
    created_at: datetime | None = None
