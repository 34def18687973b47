"""Process configuration loaded once from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Immutable application settings.

    Built once at startup; components that need a value receive it
    explicitly instead of reading the environment themselves.
    """
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    port: int = 3000
    mongo_url: str | None = None
    database_name: str = "todo_api"
    bcrypt_rounds: int = 12
    cors_origins: str = "*"
    log_level: str = "INFO"


def _get_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {value!r}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables (and a .env file if present).

    Raises:
        ValueError: JWT_SECRET_KEY is missing or an integer setting is malformed
    """
    load_dotenv()

    secret = os.getenv("JWT_SECRET_KEY")
    if not secret:
        raise ValueError(
            "JWT_SECRET_KEY environment variable is required. "
            "Generate a secure key with: openssl rand -hex 32"
        )

    return Settings(
        jwt_secret_key=secret,
        port=_get_int("PORT", 3000),
        mongo_url=os.getenv("MONGO_URL") or None,
        database_name=os.getenv("MONGODB_DATABASE", "todo_api"),
        bcrypt_rounds=_get_int("BCRYPT_ROUNDS", 12),
        cors_origins=os.getenv("CORS_ORIGINS", "*"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
