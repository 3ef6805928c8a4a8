"""Fixed value sets shared by entities, schemas and ORM models."""

from enum import Enum


class StudentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    WITHDRAWN = "withdrawn"


class StudentStage(str, Enum):
    """Journey pipeline, declared in progression order."""

    INQUIRY = "inquiry"
    APPLICATION = "application"
    OFFER = "offer"
    VISA = "visa"
    PRE_DEPARTURE = "pre_departure"
    ENROLLMENT = "enrollment"
    ALUMNI = "alumni"

    @property
    def position(self) -> int:
        return list(StudentStage).index(self)


class UniversityStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class UniversityTier(str, Enum):
    TIER1 = "tier1"
    TIER2 = "tier2"
    TIER3 = "tier3"
    TIER4 = "tier4"


class ApplicationStage(str, Enum):
    DOCUMENT_COLLECTION = "document_collection"
    UNDER_REVIEW = "under_review"
    SUBMITTED_TO_UNIVERSITY = "submitted_to_university"
    CONDITIONAL_OFFER = "conditional_offer"
    UNCONDITIONAL_OFFER = "unconditional_offer"
    REJECTED = "rejected"


class ApplicationStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    DEFERRED = "deferred"
    WITHDRAWN = "withdrawn"


class AgentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class UserRole(str, Enum):
    ADMIN = "admin"
    STAFF = "staff"


class CardPlan(str, Enum):
    STANDARD = "standard"
    PREMIUM = "premium"
    PLATINUM = "platinum"


class CardStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    EXPIRED = "expired"


class EventType(str, Enum):
    COUNSELING = "counseling"
    ORIENTATION = "orientation"
    DOCUMENT = "document"
    INTERVIEW = "interview"
    WORKSHOP = "workshop"
    OTHER = "other"


class EventStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
