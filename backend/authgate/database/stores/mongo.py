"""
MongoDB user store (motor).
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from authgate.core.errors import UniqueConstraintViolation
from authgate.database.databases import auth_db
from authgate.database.registry import create_indexes
from authgate.database.stores.base import UserStore
from authgate.models.user import UserRecord, UserSummary

logger = logging.getLogger(__name__)

SUMMARY_PROJECTION = {"hashed_password": 0}


class MongoUserStore(UserStore):
    """
    User store for the ``auth_db.users`` collection.

    Documents use the integer user id as ``_id``; ids are drawn from an
    atomic ``$inc`` on ``auth_db.counters``. Uniqueness of email and username
    is enforced by unique indexes (see ``create_indexes``).
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
        self.counters_collection = db[auth_db.Collections.COUNTERS]

    async def initialize(self) -> None:
        """Create indexes. Safe to call on every startup."""
        await create_indexes(self.db)

    async def find_by_email_or_username(
        self, email: str, username: str
    ) -> Optional[UserRecord]:
        user_doc = await self.users_collection.find_one(
            {"$or": [{"email": email}, {"username": username}]}
        )
        return self._to_record(user_doc)

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        user_doc = await self.users_collection.find_one({"email": email})
        return self._to_record(user_doc)

    async def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        user_doc = await self.users_collection.find_one({"_id": user_id})
        return self._to_record(user_doc)

    async def insert(
        self, username: str, email: str, hashed_password: str
    ) -> UserRecord:
        user_doc = {
            "_id": await self._next_user_id(),
            "username": username,
            "email": email,
            "hashed_password": hashed_password,
            "created_at": datetime.now(timezone.utc),
        }

        try:
            await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            logger.debug(f"Duplicate user rejected by unique index: {username} / {email}")
            raise UniqueConstraintViolation(str(e)) from e

        return self._to_record(user_doc)

    async def list_all(self) -> list[UserSummary]:
        cursor = self.users_collection.find(
            {}, SUMMARY_PROJECTION, sort=[("_id", 1)]
        )
        return [
            UserSummary(id=doc.pop("_id"), **doc)
            async for doc in cursor
        ]

    async def ping(self) -> None:
        await self.db.command("ping")

    async def _next_user_id(self) -> int:
        counter = await self.counters_collection.find_one_and_update(
            {"_id": auth_db.USER_ID_COUNTER},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return counter["seq"]

    @staticmethod
    def _to_record(user_doc: Optional[dict[str, Any]]) -> Optional[UserRecord]:
        if not user_doc:
            return None
        return UserRecord(
            id=user_doc["_id"],
            username=user_doc["username"],
            email=user_doc["email"],
            hashed_password=user_doc["hashed_password"],
            created_at=user_doc["created_at"],
        )
