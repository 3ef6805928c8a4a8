"""Concrete repository implementation for Agent backed by SQLAlchemy."""

from intered.application.interfaces import AgentRepository
from intered.domain.entities import Agent, AgentStatus
from intered.infrastructure.database.models import AgentModel

from .base_repository import SQLAlchemyCrudRepository


class SQLAlchemyAgentRepository(SQLAlchemyCrudRepository[Agent, AgentModel], AgentRepository):
    _model = AgentModel

    def _to_entity(self, model: AgentModel) -> Agent:
        return Agent(
            id=model.id,
            name=model.name,
            email=model.email,
            company=model.company,
            phone=model.phone,
            country=model.country,
            status=AgentStatus(model.status),
            is_featured=model.is_featured,
            created_at=model.created_at,
        )
