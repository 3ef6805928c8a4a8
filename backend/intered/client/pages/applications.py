from intered.application.schemas import ProgramResponse
from intered.client.components import application_row
from intered.client.filters import filter_applications
from intered.client.hooks.applications import ApplicationMutations, applications_query
from intered.client.hooks.base import list_fetcher
from intered.client.hooks.keys import APPLICATIONS, PROGRAMS, STUDENTS, UNIVERSITIES
from intered.client.hooks.students import students_query
from intered.client.hooks.universities import universities_query
from intered.domain.entities import ApplicationStage

from .base import Page

APPLICATION_TABS = ("all", "high_priority", *(stage.value for stage in ApplicationStage))


class ApplicationProcessingPage(Page):
    """Applications by stage tab, with student, university and program names resolved."""

    title = "Application Processing"

    def __init__(self, ctx, *, tab: str = "all"):
        super().__init__(ctx)
        self.active_tab = "all"
        self.set_tab(tab)
        self.mutations = ApplicationMutations(ctx)

    def queries(self):
        return [
            applications_query(self.ctx),
            students_query(self.ctx),
            universities_query(self.ctx),
            (PROGRAMS, list_fetcher(self.ctx, PROGRAMS, ProgramResponse)),
        ]

    def set_tab(self, tab: str) -> None:
        if tab not in APPLICATION_TABS:
            raise ValueError(f"Unknown application tab: {tab!r}")
        self.active_tab = tab

    @property
    def applications(self) -> list:
        return filter_applications(self.data(APPLICATIONS, []), self.active_tab)

    @property
    def tab_counts(self) -> dict[str, int]:
        applications = self.data(APPLICATIONS, [])
        return {tab: len(filter_applications(applications, tab)) for tab in APPLICATION_TABS}

    @property
    def rows(self):
        students = {s.id: s for s in self.data(STUDENTS, [])}
        universities = {u.id: u for u in self.data(UNIVERSITIES, [])}
        programs = {p.id: p.name for p in self.data(PROGRAMS, [])}
        return [application_row(a, students, universities, programs) for a in self.applications]
