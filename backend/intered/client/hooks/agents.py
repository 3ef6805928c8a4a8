"""Agent queries and mutations."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from intered.application.schemas import AgentResponse
from intered.client.mutations import Mutation
from intered.client.query_client import QueryState

from .base import UpdateVariables, disabled_query, item_fetcher, list_fetcher, to_payload
from .keys import AGENTS, agent_key

if TYPE_CHECKING:
    from intered.client.context import AppContext


@dataclass(frozen=True)
class FeaturedToggle:
    id: int
    is_featured: bool


def agents_query(ctx: "AppContext"):
    return AGENTS, list_fetcher(ctx, AGENTS, AgentResponse)


async def use_agents(ctx: "AppContext") -> QueryState:
    return await ctx.query_client.fetch_query(*agents_query(ctx))


async def use_agent(ctx: "AppContext", agent_id: int | None) -> QueryState:
    if not agent_id:
        return disabled_query()
    key = agent_key(agent_id)
    return await ctx.query_client.fetch_query(key, item_fetcher(ctx, key, AgentResponse))


class AgentMutations:
    def __init__(self, ctx: "AppContext"):
        api = ctx.api
        qc, toasts = ctx.query_client, ctx.toasts

        async def create(data) -> AgentResponse:
            return AgentResponse.model_validate(await api.request("POST", "/api/agents", to_payload(data)))

        async def update(variables: UpdateVariables) -> AgentResponse:
            payload = await api.request("PUT", f"/api/agents/{variables.id}", to_payload(variables.data))
            return AgentResponse.model_validate(payload)

        async def toggle(variables: FeaturedToggle) -> AgentResponse:
            payload = await api.request(
                "PUT", f"/api/agents/{variables.id}", {"isFeatured": variables.is_featured}
            )
            return AgentResponse.model_validate(payload)

        async def delete(agent_id: int) -> int:
            await api.request("DELETE", f"/api/agents/{agent_id}")
            return agent_id

        self.create = Mutation(
            qc, toasts, create,
            success_toast=lambda a, _: ("Agent Created", f"{a.name} was added"),
            error_fallback="Failed to create agent",
            invalidate=lambda a, _: [AGENTS],
        )
        self.update = Mutation(
            qc, toasts, update,
            success_toast=lambda a, _: ("Agent Updated", f"{a.name} was updated"),
            error_fallback="Failed to update agent",
            invalidate=lambda a, v: [AGENTS, agent_key(v.id)],
        )
        self.toggle_featured = Mutation(
            qc, toasts, toggle,
            success_toast=lambda a, _: (
                ("Agent Featured", f"{a.name} is now featured")
                if a.is_featured
                else ("Agent Unfeatured", f"{a.name} is no longer featured")
            ),
            error_fallback="Failed to update agent",
            invalidate=lambda a, v: [AGENTS, agent_key(v.id)],
        )
        self.delete = Mutation(
            qc, toasts, delete,
            success_toast=lambda _, __: ("Agent Deleted", "Agent was deleted successfully"),
            error_fallback="Failed to delete agent",
            invalidate=lambda aid, _: [AGENTS, agent_key(aid)],
        )


def use_agent_mutations(ctx: "AppContext") -> AgentMutations:
    return AgentMutations(ctx)
