"""
User models owned by the user store.
"""
from datetime import datetime

from pydantic import BaseModel, Field


class UserSummary(BaseModel):
    """User projection without credentials, as returned by listings."""
    id: int = Field(..., description="Store-assigned user ID")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique email address")
    created_at: datetime = Field(..., description="Account creation timestamp")


class UserRecord(UserSummary):
    """
    Full credential record.

    ``hashed_password`` is the bcrypt digest; the plaintext is never stored.
    """
    hashed_password: str = Field(..., description="Bcrypt hashed password")

    def summary(self) -> UserSummary:
        """Drop the credential fields."""
        return UserSummary(
            id=self.id,
            username=self.username,
            email=self.email,
            created_at=self.created_at,
        )
