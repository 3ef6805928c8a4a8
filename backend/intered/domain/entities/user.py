"""Domain entity: a dashboard operator account."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .enums import UserRole


@dataclass
class User:
    """A staff or admin account. ``password`` always holds a hash, never plain text."""

    username: str
    password: str
    full_name: str
    email: str
    role: UserRole = UserRole.STAFF
    id: int | None = None
    created_at: datetime | None = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
