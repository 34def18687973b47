"""Todo service — validation and update rules for todo items."""

import logging

from bson import ObjectId

from domain.model.errors import DomainError, NotFoundError, ValidationError
from domain.model.todo import Todo, now_millis
from port.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


def _check_id(todo_id: str) -> None:
    # Malformed ids never reach the store
    if not ObjectId.is_valid(todo_id):
        raise NotFoundError("Todo not found")


async def create_todo(repo: TodoRepository, text: str) -> Todo:
    text = (text or "").strip()
    if not text:
        raise ValidationError("Todo text is required")

    todo = await repo.create(text)
    if not todo:
        raise DomainError("Failed to create todo")
    return todo


async def list_todos(repo: TodoRepository) -> list[Todo]:
    todos = await repo.list_all()
    if todos is None:
        raise DomainError("Failed to list todos")
    return todos


async def get_todo(repo: TodoRepository, todo_id: str) -> Todo:
    _check_id(todo_id)
    todo = await repo.get_by_id(todo_id)
    if not todo:
        raise NotFoundError("Todo not found")
    return todo


async def delete_todo(repo: TodoRepository, todo_id: str) -> Todo:
    _check_id(todo_id)
    todo = await repo.delete(todo_id)
    if not todo:
        raise NotFoundError("Todo not found")
    logger.info("Todo deleted", extra={"todoId": todo_id})
    return todo


async def update_todo(
    repo: TodoRepository,
    todo_id: str,
    text: str | None = None,
    completed: object = None,
) -> Todo:
    """Apply a partial update.

    Completing a todo stamps ``completed_at``; anything other than an
    explicit ``completed=True`` marks it incomplete and clears the stamp.
    """
    _check_id(todo_id)

    fields: dict = {}
    if text is not None:
        text = text.strip()
        if not text:
            raise ValidationError("Todo text is required")
        fields['text'] = text

    if completed is True:
        fields['completed'] = True
        fields['completed_at'] = now_millis()
    else:
        fields['completed'] = False
        fields['completed_at'] = None

    todo = await repo.update(todo_id, fields)
    if not todo:
        raise NotFoundError("Todo not found")
    return todo
