"""
Process-local user store.
"""
import threading
from datetime import datetime, timezone
from typing import Optional

from authgate.core.errors import UniqueConstraintViolation
from authgate.database.stores.base import UserStore
from authgate.models.user import UserRecord, UserSummary


class InMemoryUserStore(UserStore):
    """
    User store backed by dictionaries.

    Ids are sequential from 1. The check-and-insert runs under a
    ``threading.Lock`` and never awaits, so it is atomic under both threaded
    and event-loop callers.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._users: dict[int, UserRecord] = {}
        self._ids_by_email: dict[str, int] = {}
        self._ids_by_username: dict[str, int] = {}
        self._next_id = 1

    async def find_by_email_or_username(
        self, email: str, username: str
    ) -> Optional[UserRecord]:
        with self._lock:
            user_id = self._ids_by_email.get(email)
            if user_id is None:
                user_id = self._ids_by_username.get(username)
            return self._users.get(user_id) if user_id is not None else None

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            user_id = self._ids_by_email.get(email)
            return self._users.get(user_id) if user_id is not None else None

    async def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        with self._lock:
            return self._users.get(user_id)

    async def insert(
        self, username: str, email: str, hashed_password: str
    ) -> UserRecord:
        with self._lock:
            if email in self._ids_by_email:
                raise UniqueConstraintViolation(f"email already exists: {email}")
            if username in self._ids_by_username:
                raise UniqueConstraintViolation(f"username already exists: {username}")

            record = UserRecord(
                id=self._next_id,
                username=username,
                email=email,
                hashed_password=hashed_password,
                created_at=datetime.now(timezone.utc),
            )
            self._users[record.id] = record
            self._ids_by_email[email] = record.id
            self._ids_by_username[username] = record.id
            self._next_id += 1
            return record

    async def list_all(self) -> list[UserSummary]:
        with self._lock:
            return [user.summary() for user in self._users.values()]

