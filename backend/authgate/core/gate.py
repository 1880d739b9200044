"""
Access gate: admits or rejects a call based on its bearer credential.
"""
import logging

from authgate.core.errors import Forbidden, TokenError, Unauthenticated
from authgate.core.tokens import TokenService
from authgate.schemas.auth import Identity

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` value.

    Returns None unless the value has exactly two parts and the first is
    the bearer scheme (case-insensitive).
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


class AccessGate:
    """
    Per-call checkpoint in front of protected operations.

    A missing credential and a bad credential are reported differently:
    no token at all is ``Unauthenticated`` (401), a token that fails
    verification for any reason is ``Forbidden`` (403).
    """

    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    def admit(self, authorization: str | None) -> Identity:
        token = extract_bearer_token(authorization)
        if token is None:
            logger.debug("Rejected call without bearer token")
            raise Unauthenticated()

        try:
            identity = self.token_service.verify(token)
        except TokenError as e:
            logger.debug(f"Rejected token: {type(e).__name__}: {e}")
            raise Forbidden() from e

        return identity
