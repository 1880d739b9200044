"""
User store interface.

The authentication core depends only on this contract; the persistence
backend is chosen at startup.
"""
from abc import ABC, abstractmethod
from typing import Optional

from authgate.models.user import UserRecord, UserSummary


class UserStore(ABC):
    """
    Durable mapping of identity to credential record.

    Implementations must enforce uniqueness of ``email`` and ``username`` at
    insert time and raise ``UniqueConstraintViolation`` on collision, so that
    two concurrent registrations can never both succeed.
    """

    @abstractmethod
    async def find_by_email_or_username(
        self, email: str, username: str
    ) -> Optional[UserRecord]:
        """Return a record matching either key, or None."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the record with this email, or None."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[UserRecord]:
        """Return the record with this id, or None."""

    @abstractmethod
    async def insert(
        self, username: str, email: str, hashed_password: str
    ) -> UserRecord:
        """
        Insert a new record and return it with its assigned id.

        Raises:
            UniqueConstraintViolation: email or username already taken
        """

    @abstractmethod
    async def list_all(self) -> list[UserSummary]:
        """Return every user, without credential fields."""

    async def initialize(self) -> None:
        """Prepare the backend (indexes, schema). Raise if it cannot be made ready."""

    async def ping(self) -> None:
        """Raise if the backend is unreachable."""

    async def close(self) -> None:
        """Release backend resources."""
