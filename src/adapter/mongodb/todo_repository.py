"""MongoDB implementation of TodoRepository."""

from logging import getLogger

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from adapter.mongodb import TODOS_COLLECTION_NAME
from domain.model.todo import Todo

logger = getLogger(__name__)

# domain field -> document field
_FIELD_NAMES = {
    'text': 'text',
    'completed': 'completed',
    'completed_at': 'completedAt',
}


class MongoTodoRepository:
    def __init__(self, db: AsyncDatabase):
        self.collection = db[TODOS_COLLECTION_NAME]

    async def ensure_indexes(self) -> bool:
        """Create indexes for todos collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            return await create_index_safe(self.collection, [('completed', 1)], 'idx_todos_completed')
        except Exception as e:
            logger.error("Failed to create todos indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> Todo:
        return Todo(
            id=str(doc['_id']),
            text=doc['text'],
            completed=doc.get('completed', False),
            completed_at=doc.get('completedAt'),
        )

    async def create(self, text: str) -> Todo | None:
        doc = {
            '_id': ObjectId(),
            'text': text,
            'completed': False,
            'completedAt': None,
        }
        try:
            await self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to create todo", extra={"error": str(e)})
            return None
        return self._to_domain(doc)

    async def list_all(self) -> list[Todo] | None:
        try:
            return [self._to_domain(doc) async for doc in self.collection.find().sort('_id', 1)]
        except PyMongoError as e:
            logger.error("Failed to list todos", extra={"error": str(e)})
            return None

    async def get_by_id(self, todo_id: str) -> Todo | None:
        try:
            doc = await self.collection.find_one({'_id': ObjectId(todo_id)})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get todo", extra={"todoId": todo_id, "error": str(e)})
            return None

    async def update(self, todo_id: str, fields: dict) -> Todo | None:
        update = {_FIELD_NAMES[k]: v for k, v in fields.items() if k in _FIELD_NAMES}
        try:
            doc = await self.collection.find_one_and_update(
                {'_id': ObjectId(todo_id)},
                {'$set': update},
                return_document=ReturnDocument.AFTER,
            )
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to update todo", extra={"todoId": todo_id, "error": str(e)})
            return None

    async def delete(self, todo_id: str) -> Todo | None:
        try:
            doc = await self.collection.find_one_and_delete({'_id': ObjectId(todo_id)})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to delete todo", extra={"todoId": todo_id, "error": str(e)})
            return None
