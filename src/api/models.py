"""Pydantic models for API request/response."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Request model for user registration."""
    email: str
    password: str


class LoginRequest(BaseModel):
    """Request model for user login."""
    email: str
    password: str


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash or sessions."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User ID")
    email: str


class TodoCreateRequest(BaseModel):
    """Request model for creating a todo."""
    text: str


class TodoUpdateRequest(BaseModel):
    """Request model for updating a todo. Unknown fields are ignored.

    ``completed`` is passed through unconverted: only a JSON ``true``
    completes a todo.
    """
    text: Optional[str] = None
    completed: Any = None


class TodoResponse(BaseModel):
    """Response model for a todo."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Todo ID")
    text: str
    completed: bool = False
    completed_at: Optional[int] = Field(
        None, alias="completedAt", description="Completion time in epoch milliseconds"
    )


class TodoEnvelope(BaseModel):
    """Single todo wrapped under a ``todo`` key."""
    todo: TodoResponse


class TodoListResponse(BaseModel):
    """Response model for todo list."""
    todos: list[TodoResponse]
