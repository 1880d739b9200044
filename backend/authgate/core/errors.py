"""
Error taxonomy for the authentication core.

``AuthError`` subclasses are client-facing: each carries the HTTP status and
message that the API boundary turns into ``{"error": message}``.
``TokenError`` and ``UniqueConstraintViolation`` are internal signals that
the services translate before anything reaches a caller.
"""
from fastapi import status


class AuthError(Exception):
    """Base class for errors converted into structured API responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    """Missing or invalid input the caller can fix."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class Conflict(AuthError):
    """Username or email already taken."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class InvalidCredentials(AuthError):
    """Login failed. Unknown email and wrong password are indistinguishable."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Unauthenticated(AuthError):
    """No usable credential was presented."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class Forbidden(AuthError):
    """A credential was presented but is invalid or expired."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid or expired token"


class NotFound(AuthError):
    """The identity named by a valid token no longer exists."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class InternalError(AuthError):
    """Unexpected failure. Details are logged, never returned."""


class TokenError(Exception):
    """Base class for token verification failures."""


class MalformedToken(TokenError):
    """Token could not be parsed."""


class InvalidSignature(TokenError):
    """Token signature does not match the server secret."""


class TokenExpired(TokenError):
    """Token is past its embedded expiry."""


class UniqueConstraintViolation(Exception):
    """Raised by a user store when an insert collides on email or username."""
