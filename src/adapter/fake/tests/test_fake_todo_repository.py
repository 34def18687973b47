"""Unit tests for FakeTodoRepository."""

import unittest

from bson import ObjectId

from adapter.fake.todo_repository import FakeTodoRepository


class TestFakeTodoRepository(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.repo = FakeTodoRepository()

    async def test_create_list_get(self):
        todo = await self.repo.create('Test todo')

        self.assertTrue(ObjectId.is_valid(todo.id))
        self.assertEqual([t.id for t in await self.repo.list_all()], [todo.id])
        self.assertEqual((await self.repo.get_by_id(todo.id)).text, 'Test todo')

    async def test_update_and_delete(self):
        todo = await self.repo.create('Test todo')

        updated = await self.repo.update(todo.id, {'completed': True, 'completed_at': 5})
        self.assertTrue(updated.completed)
        self.assertEqual(updated.completed_at, 5)

        deleted = await self.repo.delete(todo.id)
        self.assertEqual(deleted.id, todo.id)
        self.assertIsNone(await self.repo.get_by_id(todo.id))

    async def test_delete_returns_copy(self):
        todo = await self.repo.create('Test todo')
        stored = self.repo.store[todo.id]

        deleted = await self.repo.delete(todo.id)

        self.assertIsNot(deleted, stored)
        self.assertEqual(deleted, stored)
        self.assertNotIn(todo.id, self.repo.store)

    async def test_missing_todo(self):
        missing = str(ObjectId())
        self.assertIsNone(await self.repo.update(missing, {'text': 'x'}))
        self.assertIsNone(await self.repo.delete(missing))


if __name__ == '__main__':
    unittest.main()
