from .enums import (
    AgentStatus,
    ApplicationStage,
    ApplicationStatus,
    CardPlan,
    CardStatus,
    EventStatus,
    EventType,
    StudentStage,
    StudentStatus,
    UniversityStatus,
    UniversityTier,
    UserRole,
)
from .user import User
from .student import Student
from .university import University, Program
from .agent import Agent
from .application import Application
from .card import Card
from .event import Event
from .import_summary import ImportSummary, RowError

__all__ = [
    "AgentStatus",
    "ApplicationStage",
    "ApplicationStatus",
    "CardPlan",
    "CardStatus",
    "EventStatus",
    "EventType",
    "StudentStage",
    "StudentStatus",
    "UniversityStatus",
    "UniversityTier",
    "UserRole",
    "User",
    "Student",
    "University",
    "Program",
    "Agent",
    "Application",
    "Card",
    "Event",
    "ImportSummary",
    "RowError",
]
