from functools import lru_cache

from fastapi import HTTPException

from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.todo_repository import MongoTodoRepository
from adapter.mongodb.user_repository import MongoUserRepository
from port.todo_repository import TodoRepository
from port.user_repository import UserRepository
from services.token_service import TokenIssuer
from utils.config import get_settings


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[get_settings().database_name]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


def get_todo_repo() -> TodoRepository:
    return MongoTodoRepository(_get_db())


@lru_cache(maxsize=1)
def _build_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def get_token_issuer() -> TokenIssuer:
    """Process-wide token issuer, built once from Settings."""
    return _build_token_issuer()
