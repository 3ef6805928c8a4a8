from .base import CamelModel
from .user import UserCreate, LoginRequest, UserResponse, MessageResponse
from .student import (
    StudentCreate,
    StudentUpdate,
    StudentResponse,
    StudentImportResult,
    ImportRowError,
)
from .university import (
    UniversityCreate,
    UniversityUpdate,
    UniversityResponse,
    ProgramCreate,
    ProgramResponse,
)
from .agent import AgentCreate, AgentUpdate, AgentResponse
from .application import (
    ApplicationCreate,
    ApplicationUpdate,
    ApplicationResponse,
    StudentApplicationResponse,
)
from .card import CardCreate, CardResponse
from .event import EventCreate, EventResponse

__all__ = [
    "CamelModel",
    "UserCreate",
    "LoginRequest",
    "UserResponse",
    "MessageResponse",
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
    "StudentImportResult",
    "ImportRowError",
    "UniversityCreate",
    "UniversityUpdate",
    "UniversityResponse",
    "ProgramCreate",
    "ProgramResponse",
    "AgentCreate",
    "AgentUpdate",
    "AgentResponse",
    "ApplicationCreate",
    "ApplicationUpdate",
    "ApplicationResponse",
    "StudentApplicationResponse",
    "CardCreate",
    "CardResponse",
    "EventCreate",
    "EventResponse",
]
