"""
User store implementations.
"""
from authgate.database.stores.base import UserStore
from authgate.database.stores.memory import InMemoryUserStore
from authgate.database.stores.mongo import MongoUserStore

__all__ = ["UserStore", "InMemoryUserStore", "MongoUserStore"]
