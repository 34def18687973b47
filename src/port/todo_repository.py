from typing import Protocol
from domain.model.todo import Todo


class TodoRepository(Protocol):
    """Protocol defining the interface for todo data access.

    IDs passed in are already known to be well-formed ObjectId strings.
    """
    async def create(self, text: str) -> Todo | None:
        """Insert a new todo. Return Todo or None if the write failed."""
        ...

    async def list_all(self) -> list[Todo] | None:
        """Return every todo in insertion order, or None if the read failed."""
        ...

    async def get_by_id(self, todo_id: str) -> Todo | None:
        """Find a todo by ID. Return Todo or None if not found."""
        ...

    async def update(self, todo_id: str, fields: dict) -> Todo | None:
        """Apply field changes and return the updated Todo, or None if not found."""
        ...

    async def delete(self, todo_id: str) -> Todo | None:
        """Delete a todo and return it, or None if not found."""
        ...
