"""
Service layer for business logic.
"""
from authgate.services.auth_service import AuthService

__all__ = [
    "AuthService",
]
