"""Application service (use case) for recruitment agents."""

from intered.application.interfaces import AgentRepository
from intered.application.schemas import AgentCreate, AgentUpdate
from intered.domain.entities import Agent
from intered.domain.exceptions import EntityNotFoundError


class AgentService:
    def __init__(self, repository: AgentRepository):
        self._repository = repository

    async def get_agent(self, agent_id: int) -> Agent:
        agent = await self._repository.get_by_id(agent_id)
        if agent is None:
            raise EntityNotFoundError("Agent", agent_id)
        return agent

    async def list_agents(self, skip: int = 0, limit: int = 1000) -> list[Agent]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_agent(self, data: AgentCreate) -> Agent:
        return await self._repository.create(Agent(**data.model_dump()))

    async def update_agent(self, agent_id: int, data: AgentUpdate) -> Agent:
        agent = await self.get_agent(agent_id)
        agent.update(data.model_dump(exclude_unset=True))
        return await self._repository.update(agent)

    async def delete_agent(self, agent_id: int) -> bool:
        await self.get_agent(agent_id)
        return await self._repository.delete(agent_id)
