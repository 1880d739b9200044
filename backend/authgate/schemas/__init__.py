"""
Request and response schemas for API endpoints.
"""
from authgate.schemas.auth import (
    ErrorResponse,
    Identity,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
)
from authgate.schemas.user import (
    ProfileResponse,
    UserListResponse,
    UserProfile,
    UserPublic,
)

__all__ = [
    # Auth
    "ErrorResponse",
    "Identity",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    # User
    "ProfileResponse",
    "UserListResponse",
    "UserProfile",
    "UserPublic",
]
