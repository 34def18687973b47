"""Unit tests for todo_service."""

import unittest
from unittest.mock import AsyncMock

from bson import ObjectId

from adapter.fake.todo_repository import FakeTodoRepository
from domain.model.errors import DomainError, NotFoundError, ValidationError
from domain.model.todo import Todo
from services import todo_service


class TestTodoService(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.repo = FakeTodoRepository()
        self.todo = Todo(id=str(ObjectId()), text='Write test suite')
        self.done = Todo(id=str(ObjectId()), text='Feed the cat', completed=True, completed_at=1700000000000)
        self.repo.store = {self.todo.id: self.todo, self.done.id: self.done}

    async def test_create_strips_text(self):
        todo = await todo_service.create_todo(self.repo, '  Test todo  ')

        self.assertEqual(todo.text, 'Test todo')
        self.assertFalse(todo.completed)
        self.assertIsNone(todo.completed_at)
        self.assertEqual(len(self.repo.store), 3)

    async def test_create_rejects_blank_text(self):
        for text in ['', '   ', None]:
            with self.subTest(text=text):
                with self.assertRaises(ValidationError):
                    await todo_service.create_todo(self.repo, text)
        self.assertEqual(len(self.repo.store), 2)

    async def test_create_store_failure(self):
        self.repo.create = AsyncMock(return_value=None)
        with self.assertRaises(DomainError):
            await todo_service.create_todo(self.repo, 'Test todo')

    async def test_list_todos(self):
        todos = await todo_service.list_todos(self.repo)
        self.assertEqual([t.text for t in todos], ['Write test suite', 'Feed the cat'])

    async def test_list_store_failure(self):
        self.repo.list_all = AsyncMock(return_value=None)
        with self.assertRaises(DomainError):
            await todo_service.list_todos(self.repo)

    async def test_get_todo(self):
        todo = await todo_service.get_todo(self.repo, self.todo.id)
        self.assertEqual(todo.text, 'Write test suite')

    async def test_get_unknown_todo(self):
        with self.assertRaises(NotFoundError):
            await todo_service.get_todo(self.repo, str(ObjectId()))

    async def test_invalid_id_never_reaches_store(self):
        for op in (todo_service.get_todo, todo_service.delete_todo, todo_service.update_todo):
            with self.subTest(op=op.__name__):
                with self.assertRaises(NotFoundError):
                    await op(self.repo, '123')
        self.assertEqual(self.repo.calls, [])

    async def test_delete_todo(self):
        todo = await todo_service.delete_todo(self.repo, self.done.id)

        self.assertEqual(todo.id, self.done.id)
        self.assertNotIn(self.done.id, self.repo.store)

    async def test_delete_unknown_todo(self):
        with self.assertRaises(NotFoundError):
            await todo_service.delete_todo(self.repo, str(ObjectId()))

    async def test_complete_sets_timestamp(self):
        todo = await todo_service.update_todo(self.repo, self.todo.id, text='Updated todo', completed=True)

        self.assertEqual(todo.text, 'Updated todo')
        self.assertTrue(todo.completed)
        self.assertIsInstance(todo.completed_at, int)

    async def test_uncomplete_clears_timestamp(self):
        todo = await todo_service.update_todo(self.repo, self.done.id, completed=False)

        self.assertFalse(todo.completed)
        self.assertIsNone(todo.completed_at)
        self.assertEqual(todo.text, 'Feed the cat')

    async def test_update_without_completed_marks_incomplete(self):
        todo = await todo_service.update_todo(self.repo, self.done.id, text='Feed the dog')

        self.assertEqual(todo.text, 'Feed the dog')
        self.assertFalse(todo.completed)
        self.assertIsNone(todo.completed_at)

    async def test_non_boolean_completed_does_not_complete(self):
        for value in ['true', 'yes', 1]:
            with self.subTest(value=value):
                todo = await todo_service.update_todo(self.repo, self.todo.id, completed=value)
                self.assertFalse(todo.completed)
                self.assertIsNone(todo.completed_at)

    async def test_update_rejects_blank_text(self):
        with self.assertRaises(ValidationError):
            await todo_service.update_todo(self.repo, self.todo.id, text='  ')

    async def test_update_unknown_todo(self):
        with self.assertRaises(NotFoundError):
            await todo_service.update_todo(self.repo, str(ObjectId()), completed=True)


if __name__ == '__main__':
    unittest.main()
