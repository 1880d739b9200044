"""
Database connection management and user store selection.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from authgate.config import Settings
from authgate.database.stores import InMemoryUserStore, MongoUserStore, UserStore

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


def get_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    return _mongo_client


async def close_connections() -> None:
    """Close all database connections."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None


def build_user_store(settings: Settings) -> UserStore:
    """Create the user store selected by ``USER_STORE_BACKEND``."""
    if settings.user_store_backend == "mongo":
        client = get_mongo_client(settings)
        logger.info(f"Using MongoDB user store (database: {settings.mongo_db_name})")
        return MongoUserStore(client[settings.mongo_db_name])

    logger.warning("Using in-memory user store; registered users are lost on restart")
    return InMemoryUserStore()
