from .password_hasher import WerkzeugPasswordHasher
from .session_signer import SessionSigner

__all__ = ["WerkzeugPasswordHasher", "SessionSigner"]
