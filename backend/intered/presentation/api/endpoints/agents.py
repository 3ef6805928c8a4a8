"""Agent CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from intered.application.schemas import AgentCreate, AgentResponse, AgentUpdate
from intered.application.services import AgentService
from intered.domain.exceptions import EntityNotFoundError
from intered.infrastructure.dependencies import get_agent_service

router = APIRouter(prefix="/agents", tags=["Agents"])


@router.get("", response_model=list[AgentResponse])
async def list_agents(service: AgentService = Depends(get_agent_service)) -> list[AgentResponse]:
    return [AgentResponse.model_validate(a) for a in await service.list_agents()]


@router.get("/{agent_id}", response_model=AgentResponse)
async def get_agent(agent_id: int, service: AgentService = Depends(get_agent_service)) -> AgentResponse:
    try:
        agent = await service.get_agent(agent_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agent not found")
    return AgentResponse.model_validate(agent)


@router.post("", response_model=AgentResponse, status_code=status.HTTP_201_CREATED)
async def create_agent(data: AgentCreate, service: AgentService = Depends(get_agent_service)) -> AgentResponse:
    return AgentResponse.model_validate(await service.create_agent(data))


@router.api_route("/{agent_id}", methods=["PUT", "PATCH"], response_model=AgentResponse)
async def update_agent(
    agent_id: int,
    data: AgentUpdate,
    service: AgentService = Depends(get_agent_service),
) -> AgentResponse:
    try:
        agent = await service.update_agent(agent_id, data)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agent not found")
    return AgentResponse.model_validate(agent)


@router.delete("/{agent_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_agent(agent_id: int, service: AgentService = Depends(get_agent_service)) -> None:
    try:
        await service.delete_agent(agent_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agent not found")
