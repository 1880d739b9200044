"""
Authentication request/response schemas.

Request fields are optional at the schema level: presence and length checks
belong to ``AuthService`` so that every caller gets the same 400 messages.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from authgate.schemas.user import UserPublic


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: Optional[str] = Field(None, description="Unique username")
    email: Optional[str] = Field(None, description="Unique email address")
    password: Optional[str] = Field(
        None,
        description="User password (min 6 characters)",
    )


class RegisterResponse(BaseModel):
    """Registration response."""
    message: str = Field(
        default="User registered successfully",
        description="Success message",
    )
    user: UserPublic


class LoginRequest(BaseModel):
    """Login request body."""
    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    message: str = Field(default="Login successful", description="Success message")
    token: str = Field(..., description="JWT access token")
    user: UserPublic


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str = Field(..., description="Human-readable error message")


class Identity(BaseModel):
    """Decoded token claims attached to an admitted call."""
    id: int = Field(..., description="Subject user ID")
    username: str = Field(..., description="Username at issuance")
    email: str = Field(..., description="Email at issuance")
    iat: datetime = Field(..., description="Issued at time")
    exp: datetime = Field(..., description="Expiration time")
