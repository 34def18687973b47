from dataclasses import dataclass, field

AUTH_SESSION = 'auth'


@dataclass(frozen=True)
class Session:
    """A single issued session token and its kind."""
    kind: str
    token: str


@dataclass
class User:
    """Domain model representing a user account."""
    id: str
    email: str
    password_hash: str
    sessions: list[Session] = field(default_factory=list)

    def has_session(self, token: str, kind: str = AUTH_SESSION) -> bool:
        return any(s.kind == kind and s.token == token for s in self.sessions)
