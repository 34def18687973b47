"""User account routes (register, login, me, logout)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from api.dependencies import get_token_issuer, get_user_repo
from api.models import CreateUserRequest, LoginRequest, UserResponse
from api.security import AUTH_HEADER, AuthenticatedSession, get_current_session, get_current_user_required
from domain.model.errors import AuthenticationError, DomainError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository
from services import auth_service
from services.token_service import TokenIssuer
from utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _to_response(user: User) -> UserResponse:
    """Convert domain User to API UserResponse."""
    return UserResponse(id=user.id, email=user.email)


@router.post("", response_model=UserResponse)
async def create_user(
    request: CreateUserRequest,
    response: Response,
    repo: UserRepository = Depends(get_user_repo),
    issuer: TokenIssuer = Depends(get_token_issuer),
    settings: Settings = Depends(get_settings),
):
    """Register a new user and start a session.

    Returns:
        The new user; the session token is sent in the ``x-auth`` header

    Raises:
        HTTPException: 400 if the email is invalid or taken, or the password is too short
    """
    try:
        user = await auth_service.register(
            repo, request.email, request.password, bcrypt_rounds=settings.bcrypt_rounds
        )
        token = await auth_service.add_session(repo, issuer, user)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DomainError as e:
        logger.error("User registration failed", extra={"error": str(e)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    response.headers[AUTH_HEADER] = token
    return _to_response(user)


@router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    response: Response,
    repo: UserRepository = Depends(get_user_repo),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Login user and return a new session token in the ``x-auth`` header.

    Raises:
        HTTPException: 400 if credentials are invalid
    """
    try:
        user = await auth_service.find_by_credentials(repo, request.email, request.password)
        token = await auth_service.add_session(repo, issuer, user)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DomainError as e:
        logger.error("Login failed", extra={"error": str(e)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info("User logged in", extra={"userId": user.id})
    response.headers[AUTH_HEADER] = token
    return _to_response(user)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user_required)):
    """Get current authenticated user info."""
    return _to_response(current_user)


@router.delete("/me/token")
async def logout(
    session: AuthenticatedSession = Depends(get_current_session),
    repo: UserRepository = Depends(get_user_repo),
):
    """Revoke the token used to authenticate this request."""
    try:
        await auth_service.remove_session(repo, session.user, session.token)
    except DomainError:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    logger.info("User logged out", extra={"userId": session.user.id})
    return Response(status_code=status.HTTP_200_OK)
