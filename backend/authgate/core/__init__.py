"""
Core module - password hashing, tokens, access gate and the error taxonomy.
"""
from authgate.core.errors import (
    AuthError,
    Conflict,
    Forbidden,
    InternalError,
    InvalidCredentials,
    InvalidSignature,
    MalformedToken,
    NotFound,
    TokenError,
    TokenExpired,
    Unauthenticated,
    UniqueConstraintViolation,
    ValidationError,
)
from authgate.core.gate import AccessGate, extract_bearer_token
from authgate.core.security import PasswordHasher
from authgate.core.tokens import TokenService

__all__ = [
    "AccessGate",
    "extract_bearer_token",
    "PasswordHasher",
    "TokenService",
    "AuthError",
    "Conflict",
    "Forbidden",
    "InternalError",
    "InvalidCredentials",
    "InvalidSignature",
    "MalformedToken",
    "NotFound",
    "TokenError",
    "TokenExpired",
    "Unauthenticated",
    "UniqueConstraintViolation",
    "ValidationError",
]
