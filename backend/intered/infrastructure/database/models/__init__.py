from .user import UserModel
from .student import StudentModel
from .university import UniversityModel, ProgramModel
from .agent import AgentModel
from .application import ApplicationModel
from .card import CardModel
from .event import EventModel

__all__ = [
    "UserModel",
    "StudentModel",
    "UniversityModel",
    "ProgramModel",
    "AgentModel",
    "ApplicationModel",
    "CardModel",
    "EventModel",
]
