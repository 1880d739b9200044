"""
Index management for the auth database.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from authgate.database.databases import auth_db


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create the unique indexes the user store relies on.

    These indexes, not the application-level pre-check, are what make
    duplicate registration impossible under concurrent inserts.
    """
    users = db[auth_db.Collections.USERS]
    await users.create_index("email", unique=True)
    await users.create_index("username", unique=True)
