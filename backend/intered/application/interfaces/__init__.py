from .crud_repository import CrudRepository
from .user_repository import UserRepository
from .student_repository import StudentRepository
from .university_repository import UniversityRepository, ProgramRepository
from .agent_repository import AgentRepository
from .application_repository import ApplicationRepository
from .card_repository import CardRepository
from .event_repository import EventRepository
from .password_hasher import PasswordHasher
from .row_reader import RowReader

__all__ = [
    "CrudRepository",
    "UserRepository",
    "StudentRepository",
    "UniversityRepository",
    "ProgramRepository",
    "AgentRepository",
    "ApplicationRepository",
    "CardRepository",
    "EventRepository",
    "PasswordHasher",
    "RowReader",
]
