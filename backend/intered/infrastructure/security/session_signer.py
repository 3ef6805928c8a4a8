"""Signed session tokens for the login cookie.

The cookie value carries only the user id, signed and timestamped with
itsdangerous; anything that fails verification is treated as "no session".
"""

import logging

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

logger = logging.getLogger(__name__)


class SessionSigner:
    def __init__(self, secret: str, max_age: int, salt: str = "intered-session"):
        self._serializer = URLSafeTimedSerializer(secret, salt=salt)
        self._max_age = max_age

    def sign(self, user_id: int) -> str:
        return self._serializer.dumps({"uid": user_id})

    def unsign(self, token: str | None) -> int | None:
        """Return the user id stored in ``token``, or None when invalid or expired."""
        if not token:
            return None
        try:
            payload = self._serializer.loads(token, max_age=self._max_age)
        except SignatureExpired:
            logger.debug("Session token expired")
            return None
        except BadSignature:
            logger.debug("Session token has a bad signature")
            return None

        user_id = payload.get("uid") if isinstance(payload, dict) else None
        return user_id if isinstance(user_id, int) else None
