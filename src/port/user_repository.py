from typing import Protocol
from domain.model.user import Session, User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Session list updates must be atomic on the single user record:
    implementations push/pull one entry without rewriting the document.
    """
    async def create(self, email: str, password_hash: str) -> User | None:
        """Create a new user. Return User or None if creation failed.

        Raises DuplicateError if the email is already taken.
        """
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Find a user by (normalized) email. Return User or None if not found."""
        ...

    async def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    async def find_by_session(self, user_id: str, kind: str, token: str) -> User | None:
        """Find the user with this ID that still holds a matching session entry."""
        ...

    async def add_session(self, user_id: str, session: Session) -> bool:
        """Atomically append a session entry. Return True if successful."""
        ...

    async def remove_session(self, user_id: str, token: str) -> bool:
        """Atomically remove every session entry with this token.

        Removing a token that is not present still counts as success.
        """
        ...
