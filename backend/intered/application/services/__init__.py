from .auth_service import AuthService
from .student_service import StudentService
from .student_import_service import StudentImportService
from .university_service import UniversityService
from .agent_service import AgentService
from .application_service import ApplicationService, EnrichedApplication
from .card_service import CardService
from .event_service import EventService
from .stats_service import StatsService
from .demo_data_seeder import DemoDataSeeder

__all__ = [
    "AuthService",
    "StudentService",
    "StudentImportService",
    "UniversityService",
    "AgentService",
    "ApplicationService",
    "EnrichedApplication",
    "CardService",
    "EventService",
    "StatsService",
    "DemoDataSeeder",
]
