"""
User request/response schemas.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserPublic(BaseModel):
    """Identity returned by register and login (no credentials)."""
    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User email")


class UserProfile(UserPublic):
    """User information response (excludes sensitive data)."""
    model_config = ConfigDict(populate_by_name=True)

    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Account creation date",
    )


class ProfileResponse(BaseModel):
    """Current user profile."""
    user: UserProfile


class UserListResponse(BaseModel):
    """All registered users."""
    users: list[UserProfile]
