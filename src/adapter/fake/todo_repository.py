"""In-memory implementation of TodoRepository for testing."""

from dataclasses import replace

from bson import ObjectId

from domain.model.todo import Todo


class FakeTodoRepository:
    def __init__(self):
        self.store: dict[str, Todo] = {}
        self.calls: list[str] = []

    async def create(self, text: str) -> Todo | None:
        self.calls.append('create')
        todo = Todo(id=str(ObjectId()), text=text)
        self.store[todo.id] = todo
        return replace(todo)

    async def list_all(self) -> list[Todo] | None:
        self.calls.append('list_all')
        return [replace(t) for t in self.store.values()]

    async def get_by_id(self, todo_id: str) -> Todo | None:
        self.calls.append('get_by_id')
        todo = self.store.get(todo_id)
        return replace(todo) if todo else None

    async def update(self, todo_id: str, fields: dict) -> Todo | None:
        self.calls.append('update')
        todo = self.store.get(todo_id)
        if not todo:
            return None
        for key, value in fields.items():
            setattr(todo, key, value)
        return replace(todo)

    async def delete(self, todo_id: str) -> Todo | None:
        self.calls.append('delete')
        todo = self.store.pop(todo_id, None)
        return replace(todo) if todo else None
