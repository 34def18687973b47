"""MongoDB index setup, run once at startup by each MongoXxxRepository."""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def _is_conflict(error: PyMongoError) -> bool:
    message = str(error)
    return "already exists" in message or "Conflict" in message


async def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, replacing a stale index that blocks it.

    An existing index blocks creation when it shares our name or our key
    spec with different options. It is dropped and ours is recreated.
    Any other driver error propagates.
    """
    try:
        await collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if not _is_conflict(e):
            raise

    wanted = dict(keys)
    stale = [
        idx_name
        for idx_name, info in (await collection.index_information()).items()
        if idx_name != '_id_' and (idx_name == name or dict(info.get('key', [])) == wanted)
    ]
    if not stale:
        logger.error("Index conflict with no matching index", extra={"index": name})
        return False

    for idx_name in stale:
        logger.warning("Dropping stale index", extra={"index": idx_name})
        await collection.drop_index(idx_name)
    await collection.create_index(keys, name=name, **kwargs)
    logger.info("Recreated index", extra={"index": name})
    return True


async def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections."""
    from adapter.mongodb.todo_repository import MongoTodoRepository
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        await MongoUserRepository(db).ensure_indexes(),
        await MongoTodoRepository(db).ensure_indexes(),
    ]
    return all(results)
