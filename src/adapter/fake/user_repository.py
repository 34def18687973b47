"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace

from bson import ObjectId

from domain.model.errors import DuplicateError
from domain.model.user import Session, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    def _copy(self, user: User) -> User:
        # Callers get a snapshot, like a freshly loaded document
        return replace(user, sessions=list(user.sessions))

    # ── write operations ─────────────────────────────────────

    async def create(self, email: str, password_hash: str) -> User | None:
        if any(u.email == email for u in self.store.values()):
            raise DuplicateError("Email already registered")

        user = User(id=str(ObjectId()), email=email, password_hash=password_hash)
        self.store[user.id] = user
        return self._copy(user)

    async def add_session(self, user_id: str, session: Session) -> bool:
        user = self.store.get(user_id)
        if not user:
            return False
        user.sessions.append(session)
        return True

    async def remove_session(self, user_id: str, token: str) -> bool:
        if not ObjectId.is_valid(user_id):
            return False
        # $pull on a missing document is still a successful no-op
        user = self.store.get(user_id)
        if not user:
            return True
        user.sessions = [s for s in user.sessions if s.token != token]
        return True

    # ── read operations ──────────────────────────────────────

    async def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return self._copy(user)
        return None

    async def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        return self._copy(user) if user else None

    async def find_by_session(self, user_id: str, kind: str, token: str) -> User | None:
        user = self.store.get(user_id)
        if user and user.has_session(token, kind):
            return self._copy(user)
        return None
