"""Auth service — credential and session business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import asyncio
import logging

from email_validator import EmailNotValidError, validate_email

from domain.model.errors import AuthenticationError, DomainError, DuplicateError, ValidationError
from domain.model.user import AUTH_SESSION, Session, User
from port.user_repository import UserRepository
from services.passwords import BCRYPT_ROUNDS, MAX_PASSWORD_BYTES, hash_password, verify_password
from services.token_service import TokenIssuer

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

INVALID_CREDENTIALS = "Invalid email or password"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _validate_email(email: str) -> str:
    normalized = normalize_email(email)
    if not normalized:
        raise ValidationError("Email is required")
    try:
        validate_email(normalized, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError(f"{email} is not a valid email")
    return normalized


def _validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


async def find_by_email(repo: UserRepository, email: str) -> User | None:
    return await repo.get_by_email(normalize_email(email))


async def register(
    repo: UserRepository,
    email: str,
    password: str,
    bcrypt_rounds: int = BCRYPT_ROUNDS,
) -> User:
    """Register a new user.

    The password is hashed here, once, before anything is written.

    Raises:
        ValidationError: malformed email or password too short
        DuplicateError: email already registered
        DomainError: store write failed
    """
    email = _validate_email(email)
    _validate_password(password)

    if await repo.get_by_email(email):
        raise DuplicateError("Email already registered")

    # bcrypt is CPU-bound; keep it off the event loop
    password_hash = await asyncio.to_thread(hash_password, password, bcrypt_rounds)
    user = await repo.create(email=email, password_hash=password_hash)
    if not user:
        raise DomainError("Failed to create user")

    logger.info("User registered", extra={"userId": user.id})
    return user


async def find_by_credentials(repo: UserRepository, email: str, password: str) -> User:
    """Authenticate a user by email and password.

    Doesn't reveal whether the email exists.

    Raises:
        AuthenticationError: invalid credentials (deliberately vague)
    """
    user = await repo.get_by_email(normalize_email(email))
    if not user or not await asyncio.to_thread(verify_password, password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user


async def find_by_session_token(repo: UserRepository, issuer: TokenIssuer, token: str) -> User:
    """Resolve the user owning a live session token.

    The signature alone is not enough: the token must still be listed in
    the user's sessions, which is how logout revokes it.

    Raises:
        AuthenticationError: token malformed, forged, or revoked
    """
    claims = issuer.verify(token)
    if claims is None:
        raise AuthenticationError("Invalid session token")

    user = await repo.find_by_session(claims.user_id, AUTH_SESSION, token)
    if user is None:
        raise AuthenticationError("Invalid session token")
    return user


async def add_session(
    repo: UserRepository,
    issuer: TokenIssuer,
    user: User,
    kind: str = AUTH_SESSION,
) -> str:
    """Issue a new session token for ``user`` and store it.

    Raises:
        DomainError: store update failed
    """
    token = issuer.issue(user.id, kind)
    session = Session(kind=kind, token=token)

    if not await repo.add_session(user.id, session):
        raise DomainError("Failed to store session")

    user.sessions.append(session)
    logger.info("Session created", extra={"userId": user.id, "kind": kind})
    return token


async def remove_session(repo: UserRepository, user: User, token: str) -> None:
    """Revoke ``token`` for ``user``. Removing an unknown token is a no-op.

    Raises:
        DomainError: store update failed
    """
    if not await repo.remove_session(user.id, token):
        raise DomainError("Failed to remove session")

    user.sessions = [s for s in user.sessions if s.token != token]
    logger.info("Session removed", extra={"userId": user.id})
