from .agents import AgentManagementPage
from .applications import ApplicationProcessingPage
from .base import Page
from .cards import CardsPage
from .dashboard import DashboardPage
from .events import EventsPage
from .students import StudentManagementPage
from .universities import UniversityManagementPage

__all__ = [
    "AgentManagementPage",
    "ApplicationProcessingPage",
    "CardsPage",
    "DashboardPage",
    "EventsPage",
    "Page",
    "StudentManagementPage",
    "UniversityManagementPage",
]
