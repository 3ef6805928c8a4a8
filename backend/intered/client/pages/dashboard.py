from intered.client.filters import newest_first
from intered.client.hooks.agents import agents_query
from intered.client.hooks.applications import applications_query
from intered.client.hooks.keys import (
    AGENTS,
    APPLICATION_STAGE_COUNTS,
    APPLICATIONS,
    STUDENT_STAGE_COUNTS,
    STUDENTS,
)
from intered.client.hooks.stats import application_stage_counts_query, student_stage_counts_query
from intered.client.hooks.students import students_query
from intered.domain.entities import StudentStage

from .base import Page


class DashboardPage(Page):
    title = "Dashboard"

    def __init__(self, ctx, *, recent_limit: int = 5, agent_limit: int = 4):
        super().__init__(ctx)
        self.recent_limit = recent_limit
        self.agent_limit = agent_limit

    def queries(self):
        return [
            student_stage_counts_query(self.ctx),
            application_stage_counts_query(self.ctx),
            students_query(self.ctx),
            applications_query(self.ctx),
            agents_query(self.ctx),
        ]

    @property
    def student_stage_counts(self) -> dict[str, int]:
        counts = self.data(STUDENT_STAGE_COUNTS, {})
        return {stage.value: counts.get(stage.value, 0) for stage in StudentStage}

    @property
    def application_stage_counts(self) -> dict[str, int]:
        return dict(self.data(APPLICATION_STAGE_COUNTS, {}))

    @property
    def total_students(self) -> int:
        return sum(self.student_stage_counts.values())

    @property
    def total_applications(self) -> int:
        return len(self.data(APPLICATIONS, []))

    @property
    def high_priority_students(self) -> int:
        return sum(1 for s in self.data(STUDENTS, []) if s.is_high_priority)

    @property
    def recent_applications(self):
        return newest_first(self.data(APPLICATIONS, []))[: self.recent_limit]

    @property
    def newest_agents(self):
        return newest_first(self.data(AGENTS, []))[: self.agent_limit]
