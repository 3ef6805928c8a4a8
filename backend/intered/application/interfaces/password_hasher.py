"""Port for password hashing: keeps the auth service free of crypto libraries."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash suitable for storage."""
        ...

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Check a plain-text password against a stored hash."""
        ...
