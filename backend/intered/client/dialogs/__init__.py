from .assign_agent import AssignAgentDialog
from .base import DialogState, FormDialog
from .import_students import ImportStudentsDialog, is_spreadsheet
from .issue_card import IssueCardDialog, generate_card_number, one_year_from
from .schedule_event import EVENT_TITLES, ScheduleEventDialog, event_title

__all__ = [
    "AssignAgentDialog",
    "DialogState",
    "EVENT_TITLES",
    "FormDialog",
    "ImportStudentsDialog",
    "IssueCardDialog",
    "ScheduleEventDialog",
    "event_title",
    "generate_card_number",
    "is_spreadsheet",
    "one_year_from",
]
