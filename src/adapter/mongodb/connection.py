import logging
from pymongo import AsyncMongoClient

from utils.config import get_settings

logger = logging.getLogger(__name__)

# Suppress verbose PyMongo logs
# Set pymongo logger to WARNING to reduce noise from driver-level logs
pymongo_logger = logging.getLogger('pymongo')
pymongo_logger.setLevel(logging.WARNING)

_client_cache: AsyncMongoClient | None = None
_connection_failed = False


def reset_client():
    global _client_cache, _connection_failed
    _client_cache = None
    _connection_failed = False


def get_mongodb_client() -> AsyncMongoClient | None:
    """Get the process-wide async MongoDB client.

    The client connects lazily, so this never blocks; reachability is
    checked by ``ping_mongodb``. Returns None when MONGO_URL is not
    configured.
    """
    global _client_cache, _connection_failed

    if _client_cache is not None:
        return _client_cache

    # Don't retry if configuration is missing
    if _connection_failed:
        return None

    mongo_url = get_settings().mongo_url
    if not mongo_url:
        logger.error("[MONGODB] MONGO_URL not configured.")
        _connection_failed = True
        return None

    _client_cache = AsyncMongoClient(
        mongo_url,
        serverSelectionTimeoutMS=5000,  # 5s timeout for server selection
        connectTimeoutMS=5000,  # 5s timeout for initial connection
        socketTimeoutMS=30000,  # 30s timeout for operations
        maxPoolSize=10,
        minPoolSize=0,   # Don't maintain idle connections
        maxIdleTimeMS=30000,
        retryWrites=True,
        retryReads=True,
    )
    logger.info(f"[MONGODB] Client created for {get_settings().database_name}")
    return _client_cache


async def ping_mongodb(client: AsyncMongoClient) -> bool:
    """Return True if the server answers a ping."""
    try:
        await client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning(f"[MONGODB] Ping failed: {str(e)[:200]}")
        return False


async def close_mongodb_client():
    global _client_cache
    if _client_cache is not None:
        await _client_cache.close()
        _client_cache = None
