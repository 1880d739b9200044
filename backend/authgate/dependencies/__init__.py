"""
Dependencies for dependency injection in routes.
"""
from authgate.dependencies.auth import (
    AuthServiceDep,
    CurrentIdentity,
    get_access_gate,
    get_auth_service,
    get_current_identity,
)

__all__ = [
    "AuthServiceDep",
    "CurrentIdentity",
    "get_access_gate",
    "get_auth_service",
    "get_current_identity",
]
