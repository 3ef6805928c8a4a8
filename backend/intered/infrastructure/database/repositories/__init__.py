from .user_repository import SQLAlchemyUserRepository
from .student_repository import SQLAlchemyStudentRepository
from .university_repository import SQLAlchemyUniversityRepository, SQLAlchemyProgramRepository
from .agent_repository import SQLAlchemyAgentRepository
from .application_repository import SQLAlchemyApplicationRepository
from .card_repository import SQLAlchemyCardRepository
from .event_repository import SQLAlchemyEventRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyStudentRepository",
    "SQLAlchemyUniversityRepository",
    "SQLAlchemyProgramRepository",
    "SQLAlchemyAgentRepository",
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyCardRepository",
    "SQLAlchemyEventRepository",
]
