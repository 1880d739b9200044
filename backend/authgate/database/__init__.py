"""
Database module - MongoDB connection, collection definitions and user stores.
"""
from authgate.database.connections import (
    build_user_store,
    close_connections,
    get_mongo_client,
)
from authgate.database.databases import auth_db
from authgate.database.stores import InMemoryUserStore, MongoUserStore, UserStore

__all__ = [
    "build_user_store",
    "close_connections",
    "get_mongo_client",
    "auth_db",
    "InMemoryUserStore",
    "MongoUserStore",
    "UserStore",
]
