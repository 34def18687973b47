"""Session token issuing and verification (signed JWTs)."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from jose import JWTError, jwt

from domain.model.user import AUTH_SESSION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by a session token."""
    user_id: str
    kind: str


class TokenIssuer:
    """Signs and verifies session tokens.

    Tokens carry no expiry. A token stays usable only while the owning
    user still lists it among their sessions, so callers must check
    server-side presence after ``verify``.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        if not secret_key:
            raise ValueError("Token signing key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm

    def issue(self, user_id: str, kind: str = AUTH_SESSION) -> str:
        """Create a signed token for ``user_id``."""
        payload = {
            "sub": user_id,
            "kind": kind,
            "iat": datetime.now(timezone.utc),
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims | None:
        """Verify a token and extract its claims.

        Returns:
            TokenClaims if the signature and claim shape are valid, None otherwise
        """
        if not token:
            return None
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            return None

        user_id = payload.get("sub")
        kind = payload.get("kind")
        if not isinstance(user_id, str) or not isinstance(kind, str):
            logger.debug("JWT missing required claims")
            return None
        return TokenClaims(user_id=user_id, kind=kind)
