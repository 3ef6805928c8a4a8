"""Assign one student to an agent."""

from intered.client.hooks.agents import use_agents
from intered.client.hooks.keys import STUDENTS, student_key
from intered.client.mutations import Mutation
from intered.client.query_client import QueryState

from .base import FormDialog


class AssignAgentDialog(FormDialog):
    name = "assign_agent"

    def __init__(self, ctx, student_id: int, student_name: str, on_success=None):
        self.student_id = student_id
        self.student_name = student_name
        self.agent_id: int | None = None
        super().__init__(ctx, on_success)

    def _build_mutation(self) -> Mutation:
        api = self.ctx.api

        async def assign(agent_id: int):
            return await api.request("PUT", f"/api/students/{self.student_id}", {"agentId": agent_id})

        return Mutation(
            self.ctx.query_client,
            self.ctx.toasts,
            assign,
            success_toast=lambda _, __: (
                "Agent assigned",
                f'Student "{self.student_name}" has been assigned to the selected agent.',
            ),
            error_title="Failed to assign agent",
            error_fallback="An error occurred while assigning the agent",
            invalidate=lambda _, __: [STUDENTS, student_key(self.student_id)],
        )

    async def load_agents(self) -> QueryState:
        """The agent choices; only fetched once the dialog is open."""
        if not self.is_open:
            return QueryState(is_stale=False)
        return await use_agents(self.ctx)

    def reset(self) -> None:
        self.agent_id = None

    def validate(self):
        if not self.agent_id:
            return "Please select an agent", "You must select an agent to assign to this student."
        return None

    def variables(self) -> int:
        return int(self.agent_id)
