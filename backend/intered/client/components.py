"""Badge descriptors and table row projections used by the pages."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from intered.application.schemas import (
    AgentResponse,
    ApplicationResponse,
    CardResponse,
    EventResponse,
    StudentResponse,
    UniversityResponse,
)
from intered.domain.entities import (
    AgentStatus,
    ApplicationStage,
    ApplicationStatus,
    CardPlan,
    CardStatus,
    StudentStage,
    StudentStatus,
    UniversityStatus,
    UniversityTier,
)

NEUTRAL = "gray"


@dataclass(frozen=True)
class Badge:
    label: str
    tone: str


STUDENT_STAGE_TONES = {
    StudentStage.INQUIRY: "purple",
    StudentStage.APPLICATION: "blue",
    StudentStage.OFFER: "yellow",
    StudentStage.VISA: "green",
    StudentStage.PRE_DEPARTURE: "indigo",
    StudentStage.ENROLLMENT: "pink",
    StudentStage.ALUMNI: "gray",
}

STUDENT_STATUS_TONES = {
    StudentStatus.ACTIVE: "green",
    StudentStatus.INACTIVE: "gray",
    StudentStatus.ON_HOLD: "yellow",
    StudentStatus.COMPLETED: "blue",
    StudentStatus.WITHDRAWN: "red",
}

APPLICATION_STAGE_TONES = {
    ApplicationStage.DOCUMENT_COLLECTION: "yellow",
    ApplicationStage.UNDER_REVIEW: "purple",
    ApplicationStage.SUBMITTED_TO_UNIVERSITY: "blue",
    ApplicationStage.CONDITIONAL_OFFER: "green",
    ApplicationStage.UNCONDITIONAL_OFFER: "emerald",
    ApplicationStage.REJECTED: "red",
}

APPLICATION_STATUS_TONES = {
    ApplicationStatus.IN_PROGRESS: "yellow",
    ApplicationStatus.SUBMITTED: "blue",
    ApplicationStatus.UNDER_REVIEW: "purple",
    ApplicationStatus.ACCEPTED: "green",
    ApplicationStatus.REJECTED: "red",
    ApplicationStatus.DEFERRED: "purple",
    ApplicationStatus.WITHDRAWN: "gray",
}

AGENT_STATUS_TONES = {
    AgentStatus.ACTIVE: "green",
    AgentStatus.INACTIVE: "gray",
    AgentStatus.PENDING: "yellow",
}

UNIVERSITY_STATUS_TONES = {
    UniversityStatus.ACTIVE: "green",
    UniversityStatus.INACTIVE: "gray",
    UniversityStatus.PENDING: "yellow",
}

CARD_STATUS_TONES = {
    CardStatus.ACTIVE: "green",
    CardStatus.SUSPENDED: "red",
    CardStatus.EXPIRED: "gray",
}

CARD_PLAN_TONES = {
    CardPlan.STANDARD: "blue",
    CardPlan.PREMIUM: "purple",
    CardPlan.PLATINUM: "slate",
}

TIER_LABELS = {
    UniversityTier.TIER1: "Tier 1",
    UniversityTier.TIER2: "Tier 2",
    UniversityTier.TIER3: "Tier 3",
    UniversityTier.TIER4: "Tier 4",
}


def humanize(value: Any) -> str:
    """Turn an enum value into a label, e.g. pre_departure to "Pre departure"."""
    text = value.value if isinstance(value, Enum) else str(value or "")
    text = text.replace("_", " ")
    return text[:1].upper() + text[1:]


def badge(value: Any, tones: Mapping[Any, str]) -> Badge:
    return Badge(humanize(value), tones.get(value, NEUTRAL))


@dataclass(frozen=True)
class StudentRow:
    id: int
    name: str
    email: str
    phone: str
    stage: Badge
    status: Badge
    agent: str
    university: str
    is_high_priority: bool


def student_row(student: StudentResponse) -> StudentRow:
    return StudentRow(
        id=student.id,
        name=f"{student.first_name} {student.last_name}",
        email=student.email,
        phone=student.phone or "",
        stage=badge(student.stage, STUDENT_STAGE_TONES),
        status=badge(student.status, STUDENT_STATUS_TONES),
        agent=student.agent or "Unassigned",
        university=student.university or "",
        is_high_priority=student.is_high_priority,
    )


@dataclass(frozen=True)
class ApplicationRow:
    id: int
    student: str
    university: str
    program: str
    stage: Badge
    status: Badge
    is_high_priority: bool


def application_row(
    application: ApplicationResponse,
    students: Mapping[int, StudentResponse] = {},
    universities: Mapping[int, UniversityResponse] = {},
    program_names: Mapping[int, str] = {},
) -> ApplicationRow:
    """Resolve ids through the given lookups; unknown ids show as "#<id>"."""
    student = students.get(application.student_id)
    university = universities.get(application.university_id)
    university_name = getattr(application, "university_name", None) or (
        university.name if university else f"#{application.university_id}"
    )
    program_name = getattr(application, "program_name", None) or program_names.get(
        application.program_id, f"#{application.program_id}"
    )
    return ApplicationRow(
        id=application.id,
        student=f"{student.first_name} {student.last_name}" if student else f"#{application.student_id}",
        university=university_name,
        program=program_name,
        stage=badge(application.stage, APPLICATION_STAGE_TONES),
        status=badge(application.status, APPLICATION_STATUS_TONES),
        is_high_priority=application.is_high_priority,
    )


@dataclass(frozen=True)
class UniversityRow:
    id: int
    name: str
    location: str
    tier: str
    status: Badge


def university_row(university: UniversityResponse) -> UniversityRow:
    location = ", ".join(part for part in (university.city, university.country) if part)
    return UniversityRow(
        id=university.id,
        name=university.name,
        location=location,
        tier=TIER_LABELS.get(university.tier, humanize(university.tier)),
        status=badge(university.status, UNIVERSITY_STATUS_TONES),
    )


@dataclass(frozen=True)
class AgentRow:
    id: int
    name: str
    company: str
    country: str
    status: Badge
    is_featured: bool


def agent_row(agent: AgentResponse) -> AgentRow:
    return AgentRow(
        id=agent.id,
        name=agent.name,
        company=agent.company or "",
        country=agent.country or "",
        status=badge(agent.status, AGENT_STATUS_TONES),
        is_featured=agent.is_featured,
    )


@dataclass(frozen=True)
class CardRow:
    id: int
    card_number: str
    student: str
    plan: Badge
    status: Badge
    expiry_date: str


def card_row(card: CardResponse, students: Mapping[int, StudentResponse] = {}) -> CardRow:
    student = students.get(card.student_id)
    return CardRow(
        id=card.id,
        card_number=card.card_number,
        student=f"{student.first_name} {student.last_name}" if student else f"#{card.student_id}",
        plan=badge(card.plan, CARD_PLAN_TONES),
        status=badge(card.status, CARD_STATUS_TONES),
        expiry_date=card.expiry_date.isoformat(),
    )


@dataclass(frozen=True)
class EventRow:
    id: int
    title: str
    when: str
    event_type: str
    status: str


def event_row(event: EventResponse) -> EventRow:
    when = event.event_date.isoformat()
    if event.start_time:
        when += f" {event.start_time}"
        if event.end_time:
            when += f"-{event.end_time}"
    return EventRow(
        id=event.id,
        title=event.title,
        when=when,
        event_type=humanize(event.event_type),
        status=humanize(event.status),
    )
