"""Session-token authentication dependencies."""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from api.dependencies import get_token_issuer, get_user_repo
from domain.model.errors import AuthenticationError
from domain.model.user import User
from port.user_repository import UserRepository
from services import auth_service
from services.token_service import TokenIssuer

logger = logging.getLogger(__name__)

AUTH_HEADER = "x-auth"

x_auth_header = APIKeyHeader(name=AUTH_HEADER, auto_error=False)


@dataclass
class AuthenticatedSession:
    """The authenticated user and the exact token they presented."""
    user: User
    token: str


def require_session_token(token: Optional[str] = Depends(x_auth_header)) -> str:
    """Reject requests without an ``x-auth`` header before any store is resolved."""
    if not token:
        raise AuthenticationError("Not authenticated")
    return token


async def get_current_session(
    request: Request,
    token: str = Depends(require_session_token),
    user_repo: UserRepository = Depends(get_user_repo),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthenticatedSession:
    """Authenticate the request from its ``x-auth`` header.

    Raises AuthenticationError (mapped to an empty 401 by the app) when the
    token is missing, invalid, or revoked. The reason is not exposed.
    """
    try:
        user = await auth_service.find_by_session_token(user_repo, issuer, token)
    except AuthenticationError:
        logger.debug("Rejected session token", extra={"path": request.url.path})
        raise

    request.state.user = user
    request.state.token = token
    return AuthenticatedSession(user=user, token=token)


async def get_current_user_required(
    session: AuthenticatedSession = Depends(get_current_session),
) -> User:
    """Get current authenticated user (required)."""
    return session.user
