"""Abstract repository interface (port) for Agent persistence."""

from intered.domain.entities import Agent

from .crud_repository import CrudRepository


class AgentRepository(CrudRepository[Agent]):
    """Port for agent persistence: implemented in the infrastructure layer."""
