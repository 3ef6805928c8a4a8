"""PasswordHasher adapter backed by werkzeug.security."""

from werkzeug.security import check_password_hash, generate_password_hash

from intered.application.interfaces import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return generate_password_hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        return check_password_hash(hashed, password)
