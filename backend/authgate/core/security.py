"""
Password hashing and verification.
"""
from functools import cached_property

from passlib.context import CryptContext

# bcrypt cost factor; each increment doubles hashing time
DEFAULT_BCRYPT_ROUNDS = 10


class PasswordHasher:
    """
    One-way bcrypt hashing through a passlib ``CryptContext``.

    New digests use passlib's ``bcrypt_sha256`` scheme: the password is
    HMAC-SHA256'd before bcrypt, so NUL bytes and passwords longer than
    bcrypt's 72-byte limit hash like any other input. The digest embeds the
    work factor and a random salt, e.g.
    ``$bcrypt-sha256$v=2,t=2b,r=10$<salt>$<hash>``. Plain ``$2b$`` bcrypt
    digests still verify.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt_sha256", "bcrypt"],
            deprecated="auto",
            bcrypt_sha256__rounds=rounds,
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string
        """
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str | None) -> bool:
        """
        Verify a plain password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if password matches, False otherwise (including when the
            stored hash is malformed or of an unknown scheme)
        """
        if not hashed_password:
            return False
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            return False

    @cached_property
    def dummy_hash(self) -> str:
        """Digest of a throwaway password, at the same work factor."""
        return self.hash("authgate-dummy-password")

    def dummy_verify(self, plain_password: str) -> bool:
        """
        Spend the same time as a real verification, always returning False.

        Used when there is no stored digest to check against.
        """
        self.verify(plain_password, self.dummy_hash)
        return False
