"""
Authentication service for user registration, login and profile lookups.
"""
import functools
import logging
from typing import Awaitable, Callable, TypeVar

from starlette.concurrency import run_in_threadpool

from authgate.core.errors import (
    AuthError,
    Conflict,
    InternalError,
    InvalidCredentials,
    NotFound,
    UniqueConstraintViolation,
    ValidationError,
)
from authgate.core.security import PasswordHasher
from authgate.core.tokens import TokenService
from authgate.database.stores import UserStore
from authgate.models.user import UserSummary
from authgate.schemas.auth import Identity
from authgate.schemas.user import UserPublic

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

T = TypeVar("T")


def operation(name: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Wrap a service operation so that anything other than an ``AuthError``
    is logged with its traceback and surfaced as a generic ``InternalError``.
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except AuthError:
                raise
            except Exception as e:
                logger.exception(f"{name} failed")
                raise InternalError() from e
        return wrapper
    return decorator


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        store: UserStore,
        hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.store = store
        self.hasher = hasher
        self.token_service = token_service

    @operation("Registration")
    async def register(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
    ) -> UserPublic:
        """
        Register a new user.

        Returns:
            The new user's public identity (never the hash)

        Raises:
            ValidationError: missing field or password too short
            Conflict: email or username already taken
        """
        if not username or not email or not password:
            raise ValidationError("All fields are required")

        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        existing = await self.store.find_by_email_or_username(email, username)
        if existing:
            raise Conflict("User already exists")

        hashed_password = await run_in_threadpool(self.hasher.hash, password)

        # The store's unique constraint closes the race with a concurrent
        # registration that passed the check above
        try:
            record = await self.store.insert(username, email, hashed_password)
        except UniqueConstraintViolation:
            raise Conflict("User already exists")

        logger.info(f"Registered user {record.id} ({record.username})")
        return UserPublic(id=record.id, username=record.username, email=record.email)

    @operation("Login")
    async def login(
        self,
        email: str | None,
        password: str | None,
    ) -> tuple[str, UserPublic]:
        """
        Authenticate user and return a JWT token.

        Returns:
            Tuple of (token, public identity)

        Raises:
            ValidationError: email or password missing
            InvalidCredentials: unknown email or wrong password
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        record = await self.store.find_by_email(email)
        if record is None:
            # Unknown email costs one bcrypt verification, like a wrong password
            await run_in_threadpool(self.hasher.dummy_verify, password)
            logger.info("Login failed: unknown email")
            raise InvalidCredentials()

        is_valid = await run_in_threadpool(
            self.hasher.verify, password, record.hashed_password
        )
        if not is_valid:
            logger.info(f"Login failed: wrong password for user {record.id}")
            raise InvalidCredentials()

        token = self.token_service.issue(
            user_id=record.id,
            username=record.username,
            email=record.email,
        )
        logger.info(f"User {record.id} logged in")
        return token, UserPublic(
            id=record.id, username=record.username, email=record.email
        )

    @operation("Profile lookup")
    async def get_profile(self, identity: Identity) -> UserSummary:
        """
        Get the current record for an admitted identity.

        Raises:
            NotFound: the user was removed after the token was issued
        """
        record = await self.store.find_by_id(identity.id)
        if record is None:
            raise NotFound("User not found")
        return record.summary()

    @operation("User listing")
    async def list_users(self) -> list[UserSummary]:
        """List all users without credentials."""
        return await self.store.list_all()
