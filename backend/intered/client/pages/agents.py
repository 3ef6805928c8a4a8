from intered.client.components import agent_row
from intered.client.filters import search
from intered.client.hooks.agents import AgentMutations, FeaturedToggle, agents_query
from intered.client.hooks.keys import AGENTS

from .base import Page


class AgentManagementPage(Page):
    title = "Agent Management"

    def __init__(self, ctx):
        super().__init__(ctx)
        self.status_filter = "all"
        self.search_text = ""
        self.mutations = AgentMutations(ctx)

    def queries(self):
        return [agents_query(self.ctx)]

    @property
    def agents(self) -> list:
        agents = self.data(AGENTS, [])
        if self.status_filter != "all":
            agents = [a for a in agents if a.status == self.status_filter]
        return search(agents, self.search_text, ("name", "company", "email", "country"))

    @property
    def featured(self) -> list:
        return [a for a in self.data(AGENTS, []) if a.is_featured]

    @property
    def rows(self):
        return [agent_row(a) for a in self.agents]

    async def toggle_featured(self, agent):
        return await self.mutations.toggle_featured.mutate(FeaturedToggle(agent.id, not agent.is_featured))
