"""
Signed session tokens (JWT, HS256 by default).

Tokens are not stored anywhere: validity is a function of the signature and
the embedded ``exp`` claim at verification time. Rotating the secret
invalidates every outstanding token.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError
from pydantic import ValidationError as PydanticValidationError

from authgate.config import Settings
from authgate.core.errors import InvalidSignature, MalformedToken, TokenExpired
from authgate.schemas.auth import Identity

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and verifies bearer tokens for authenticated users."""

    def __init__(self, settings: Settings, clock: Clock | None = None):
        self.secret_key = settings.jwt_secret_key
        self.algorithm = settings.jwt_algorithm
        self.lifetime = timedelta(minutes=settings.jwt_access_token_expire_minutes)
        self._clock = clock or utcnow

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self.lifetime.total_seconds())

    def issue(self, user_id: int, username: str, email: str) -> str:
        """
        Create a signed access token for a user.

        Args:
            user_id: Store-assigned user id
            username: Username claim
            email: Email claim

        Returns:
            Encoded JWT (URL-safe compact serialization)
        """
        issued_at = self._clock()
        payload = {
            "sub": str(user_id),
            "id": user_id,
            "username": username,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str | None) -> Identity:
        """
        Verify a token and return the identity it carries.

        Raises:
            MalformedToken: token cannot be parsed or lacks required claims
            InvalidSignature: signature does not match the secret
            TokenExpired: current time is past the ``exp`` claim
        """
        if not token:
            raise MalformedToken("Empty token")

        try:
            jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise MalformedToken(str(e)) from e

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTClaimsError as e:
            raise MalformedToken(str(e)) from e
        except JWTError as e:
            raise InvalidSignature(str(e)) from e

        if not isinstance(payload.get("exp"), (int, float)):
            raise MalformedToken("Token has no expiry")
        if self.is_expired(payload):
            raise TokenExpired("Token has expired")

        try:
            return Identity.model_validate(payload)
        except PydanticValidationError as e:
            raise MalformedToken("Token is missing required claims") from e

    def is_expired(self, payload: dict[str, Any]) -> bool:
        """
        Check if a decoded token payload is expired.

        Args:
            payload: Decoded JWT payload

        Returns:
            True if expired or ``exp`` is missing, False otherwise
        """
        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            return True
        return self._clock() > datetime.fromtimestamp(exp, tz=timezone.utc)
