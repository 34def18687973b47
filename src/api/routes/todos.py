"""Todo CRUD routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_todo_repo
from api.models import (
    TodoCreateRequest,
    TodoEnvelope,
    TodoListResponse,
    TodoResponse,
    TodoUpdateRequest,
)
from domain.model.errors import DomainError, NotFoundError
from domain.model.todo import Todo
from port.todo_repository import TodoRepository
from services import todo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])


def _to_response(todo: Todo) -> TodoResponse:
    return TodoResponse(
        id=todo.id,
        text=todo.text,
        completed=todo.completed,
        completed_at=todo.completed_at,
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")


@router.post("", response_model=TodoResponse)
async def create_todo(request: TodoCreateRequest, repo: TodoRepository = Depends(get_todo_repo)):
    try:
        todo = await todo_service.create_todo(repo, request.text)
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_response(todo)


@router.get("", response_model=TodoListResponse)
async def list_todos(repo: TodoRepository = Depends(get_todo_repo)):
    try:
        todos = await todo_service.list_todos(repo)
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TodoListResponse(todos=[_to_response(t) for t in todos])


@router.get("/{todo_id}", response_model=TodoEnvelope)
async def get_todo(todo_id: str, repo: TodoRepository = Depends(get_todo_repo)):
    try:
        todo = await todo_service.get_todo(repo, todo_id)
    except NotFoundError:
        raise _not_found()
    return TodoEnvelope(todo=_to_response(todo))


@router.delete("/{todo_id}", response_model=TodoEnvelope)
async def delete_todo(todo_id: str, repo: TodoRepository = Depends(get_todo_repo)):
    try:
        todo = await todo_service.delete_todo(repo, todo_id)
    except NotFoundError:
        raise _not_found()
    return TodoEnvelope(todo=_to_response(todo))


@router.patch("/{todo_id}", response_model=TodoEnvelope)
async def update_todo(
    todo_id: str,
    request: TodoUpdateRequest,
    repo: TodoRepository = Depends(get_todo_repo),
):
    """Update text and/or completion state.

    Sending ``completed: true`` stamps ``completedAt``; anything else
    clears both.
    """
    try:
        todo = await todo_service.update_todo(
            repo, todo_id, text=request.text, completed=request.completed
        )
    except NotFoundError:
        raise _not_found()
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TodoEnvelope(todo=_to_response(todo))
