from intered.client.actions import standard_actions
from intered.client.components import student_row
from intered.client.dialogs import (
    AssignAgentDialog,
    ImportStudentsDialog,
    IssueCardDialog,
    ScheduleEventDialog,
)
from intered.client.filters import filter_students, search
from intered.client.hooks.keys import STUDENTS
from intered.client.hooks.students import PriorityToggle, StudentMutations, students_query

from .base import Page

STUDENT_TABS = {
    "all": "all",
    "inquiries": "inquiry",
    "prospective": "prospective",
    "current": "current",
    "alumni": "alumni",
}


def _full_name(student) -> str:
    return f"{student.first_name} {student.last_name}"


class StudentManagementPage(Page):
    """Student table with tabs, a filter select and a search box."""

    title = "Student Management"

    def __init__(self, ctx, *, tab: str = "all"):
        super().__init__(ctx)
        self.active_tab = tab
        self.selected_filter = "all"
        self.search_text = ""
        self.mutations = StudentMutations(ctx)
        self.import_dialog = ImportStudentsDialog(ctx)

    def queries(self):
        return [students_query(self.ctx)]

    def set_tab(self, tab: str) -> None:
        if tab not in STUDENT_TABS:
            raise ValueError(f"Unknown student tab: {tab!r}")
        self.active_tab = tab

    @property
    def students(self) -> list:
        students = filter_students(self.data(STUDENTS, []), STUDENT_TABS[self.active_tab])
        students = filter_students(students, self.selected_filter)
        return search(students, self.search_text, (_full_name, "email"))

    @property
    def rows(self):
        return [student_row(s) for s in self.students]

    def issue_card_dialog(self, student) -> IssueCardDialog:
        return IssueCardDialog(self.ctx, student.id, _full_name(student))

    def schedule_event_dialog(self, student) -> ScheduleEventDialog:
        return ScheduleEventDialog(self.ctx, student.id, _full_name(student))

    def assign_agent_dialog(self, student) -> AssignAgentDialog:
        return AssignAgentDialog(self.ctx, student.id, _full_name(student))

    async def toggle_priority(self, student):
        return await self.mutations.toggle_priority.mutate(
            PriorityToggle(student.id, not student.is_high_priority)
        )

    async def delete(self, student):
        return await self.mutations.delete.mutate(student.id)

    def actions(self, student, *, open_dialog=None, navigate=None) -> list:
        """Row menu; dialog-opening entries hand the dialog to ``open_dialog``."""
        show = open_dialog or (lambda dialog: dialog.open())
        return standard_actions(
            view=(lambda: navigate(f"/students/{student.id}")) if navigate else None,
            mark_as_priority=lambda: self.toggle_priority(student),
            assign_to_agent=lambda: show(self.assign_agent_dialog(student)),
            issue_card=lambda: show(self.issue_card_dialog(student)),
            schedule_event=lambda: show(self.schedule_event_dialog(student)),
            delete=lambda: self.delete(student),
        )
