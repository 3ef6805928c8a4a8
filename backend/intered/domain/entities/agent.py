"""Domain entity: a recruitment agent or partner agency."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .enums import AgentStatus


@dataclass
class Agent:
    name: str
    email: str
    company: str | None = None
    phone: str | None = None
    country: str | None = None
    status: AgentStatus = AgentStatus.ACTIVE
    is_featured: bool = False
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, changes: dict[str, Any]) -> None:
        for name, value in changes.items():
            if name in ("id", "created_at"):
                continue
            if hasattr(self, name):
                setattr(self, name, value)
