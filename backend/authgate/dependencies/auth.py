"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from authgate.core.gate import AccessGate
from authgate.schemas.auth import Identity
from authgate.services.auth_service import AuthService


def get_auth_service(request: Request) -> AuthService:
    """Dependency to get the application's AuthService."""
    return request.app.state.auth_service


def get_access_gate(request: Request) -> AccessGate:
    """Dependency to get the application's AccessGate."""
    return request.app.state.access_gate


async def get_current_identity(
    gate: Annotated[AccessGate, Depends(get_access_gate)],
    authorization: Annotated[
        Optional[str], Header(description="Bearer access token")
    ] = None,
) -> Identity:
    """
    Dependency to get the authenticated identity from the bearer token.

    Token is passed as a header: ``Authorization: Bearer <token>``

    Raises:
        Unauthenticated (401): header missing or not a bearer credential
        Forbidden (403): token invalid or expired
    """
    return gate.admit(authorization)


# Type aliases for cleaner route signatures
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
