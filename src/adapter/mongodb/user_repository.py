"""MongoDB implementation of UserRepository."""

from logging import getLogger

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateError
from domain.model.user import Session, User

logger = getLogger(__name__)


def _object_id(user_id: str) -> ObjectId | None:
    if not ObjectId.is_valid(user_id):
        return None
    return ObjectId(user_id)


class MongoUserRepository:
    def __init__(self, db: AsyncDatabase):
        self.collection = db[USERS_COLLECTION_NAME]

    async def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            return all([
                await create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True),
                await create_index_safe(self.collection, [('sessions.token', 1)], 'idx_users_session_token'),
            ])
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=str(doc['_id']),
            email=doc['email'],
            password_hash=doc.get('passwordHash', ''),
            sessions=[
                Session(kind=s['kind'], token=s['token'])
                for s in doc.get('sessions', [])
            ],
        )

    async def create(self, email: str, password_hash: str) -> User | None:
        """Create a new user and return the User object."""
        user_doc = {
            '_id': ObjectId(),
            'email': email,
            'passwordHash': password_hash,
            'sessions': [],
        }
        try:
            await self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists")
            raise DuplicateError("Email already registered")
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"error": str(e)})
            return None

        user = self._to_domain(user_doc)
        logger.info("User created", extra={"userId": user.id})
        return user

    async def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            doc = await self.collection.find_one({'email': email})
            if doc:
                return self._to_domain(doc)
            return None
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"error": str(e)})
            return None

    async def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        oid = _object_id(user_id)
        if oid is None:
            return None
        try:
            doc = await self.collection.find_one({'_id': oid})
            if doc:
                return self._to_domain(doc)
            return None
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            return None

    async def find_by_session(self, user_id: str, kind: str, token: str) -> User | None:
        """Find a user by ID that still holds the (kind, token) session."""
        oid = _object_id(user_id)
        if oid is None:
            return None
        try:
            doc = await self.collection.find_one({
                '_id': oid,
                'sessions': {'$elemMatch': {'kind': kind, 'token': token}},
            })
            if doc:
                return self._to_domain(doc)
            return None
        except PyMongoError as e:
            logger.error("Failed to find user by session", extra={"userId": user_id, "error": str(e)})
            return None

    async def add_session(self, user_id: str, session: Session) -> bool:
        """Append a session entry with a single $push."""
        oid = _object_id(user_id)
        if oid is None:
            return False
        try:
            result = await self.collection.update_one(
                {'_id': oid},
                {'$push': {'sessions': {'kind': session.kind, 'token': session.token}}}
            )
            if result.matched_count == 0:
                logger.warning("Session not stored: user missing", extra={"userId": user_id})
                return False
            return True
        except PyMongoError as e:
            logger.error("Failed to add session", extra={"userId": user_id, "error": str(e)})
            return False

    async def remove_session(self, user_id: str, token: str) -> bool:
        """Remove every entry for ``token`` with a single $pull."""
        oid = _object_id(user_id)
        if oid is None:
            return False
        try:
            await self.collection.update_one(
                {'_id': oid},
                {'$pull': {'sessions': {'token': token}}}
            )
            return True
        except PyMongoError as e:
            logger.error("Failed to remove session", extra={"userId": user_id, "error": str(e)})
            return False
