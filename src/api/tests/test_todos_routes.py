"""Tests for /todos routes."""

import unittest
from unittest.mock import AsyncMock

from bson import ObjectId
from fastapi.testclient import TestClient

from api.main import app
from api.dependencies import get_todo_repo
from adapter.fake.todo_repository import FakeTodoRepository
from domain.model.todo import Todo


class TodosRouteTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeTodoRepository()
        self.todos = [
            Todo(id=str(ObjectId()), text='Write test suite'),
            Todo(id=str(ObjectId()), text='Feed the cat', completed=True, completed_at=1700000000000),
        ]
        self.repo.store = {t.id: t for t in self.todos}
        app.dependency_overrides[get_todo_repo] = lambda: self.repo

    def tearDown(self):
        app.dependency_overrides.clear()


class TestCreateTodo(TodosRouteTestCase):

    def test_creates_todo(self):
        response = self.client.post('/todos', json={'text': 'Test todo'})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['text'], 'Test todo')
        self.assertFalse(body['completed'])
        self.assertIsNone(body['completedAt'])
        self.assertTrue(ObjectId.is_valid(body['_id']))
        self.assertEqual(len(self.repo.store), 3)

    def test_rejects_missing_body(self):
        response = self.client.post('/todos')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(self.repo.store), 2)

    def test_rejects_blank_text(self):
        response = self.client.post('/todos', json={'text': '   '})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(self.repo.store), 2)


class TestListTodos(TodosRouteTestCase):

    def test_gets_all_todos(self):
        response = self.client.get('/todos')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()['todos']), 2)

    def test_store_failure_is_400(self):
        self.repo.list_all = AsyncMock(return_value=None)

        response = self.client.get('/todos')

        self.assertEqual(response.status_code, 400)


class TestGetTodo(TodosRouteTestCase):

    def test_returns_todo(self):
        response = self.client.get(f'/todos/{self.todos[0].id}')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['todo']['text'], 'Write test suite')

    def test_404_if_not_found(self):
        response = self.client.get(f'/todos/{ObjectId()}')

        self.assertEqual(response.status_code, 404)

    def test_404_if_id_invalid(self):
        response = self.client.get('/todos/123')

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.repo.calls, [])


class TestDeleteTodo(TodosRouteTestCase):

    def test_removes_todo(self):
        hex_id = self.todos[1].id

        response = self.client.delete(f'/todos/{hex_id}')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['todo']['_id'], hex_id)
        self.assertNotIn(hex_id, self.repo.store)

    def test_404_if_not_found(self):
        response = self.client.delete(f'/todos/{ObjectId()}')

        self.assertEqual(response.status_code, 404)

    def test_404_if_id_invalid_without_touching_store(self):
        response = self.client.delete('/todos/123')

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.repo.calls, [])
        self.assertEqual(len(self.repo.store), 2)


class TestUpdateTodo(TodosRouteTestCase):

    def test_updates_todo(self):
        response = self.client.patch(
            f'/todos/{self.todos[0].id}', json={'text': 'Updated todo', 'completed': True}
        )

        self.assertEqual(response.status_code, 200)
        todo = response.json()['todo']
        self.assertEqual(todo['text'], 'Updated todo')
        self.assertTrue(todo['completed'])
        self.assertIsInstance(todo['completedAt'], int)

    def test_clears_completed_at_when_not_completed(self):
        response = self.client.patch(
            f'/todos/{self.todos[1].id}', json={'text': 'Second updated todo', 'completed': False}
        )

        self.assertEqual(response.status_code, 200)
        todo = response.json()['todo']
        self.assertEqual(todo['text'], 'Second updated todo')
        self.assertFalse(todo['completed'])
        self.assertIsNone(todo['completedAt'])

    def test_only_json_true_completes(self):
        for value in ['true', 'yes', 1]:
            with self.subTest(value=value):
                response = self.client.patch(f'/todos/{self.todos[0].id}', json={'completed': value})

                self.assertEqual(response.status_code, 200)
                todo = response.json()['todo']
                self.assertFalse(todo['completed'])
                self.assertIsNone(todo['completedAt'])

    def test_ignores_unknown_fields(self):
        response = self.client.patch(
            f'/todos/{self.todos[0].id}', json={'completed': True, '_id': 'hijack'}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['todo']['_id'], self.todos[0].id)

    def test_404_if_id_invalid(self):
        response = self.client.patch('/todos/123', json={'completed': True})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.repo.calls, [])

    def test_404_if_not_found(self):
        response = self.client.patch(f'/todos/{ObjectId()}', json={'completed': True})

        self.assertEqual(response.status_code, 404)


if __name__ == '__main__':
    unittest.main()
