"""
Global test fixtures for authgate.

This module provides shared fixtures for all tests including:
- Isolated settings with a per-test signing secret
- In-memory and mock MongoDB (mongomock-motor) user stores
- Core services (hasher, token service, access gate, auth service)
- FastAPI test clients
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# The app module builds a default application at import time
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-do-not-use-in-prod")


# =============================================================================
# Settings & Clock Fixtures
# =============================================================================

TEST_SECRET = "unit-test-signing-secret-0123456789"


@pytest.fixture
def settings():
    """Settings isolated from the environment, with fast bcrypt rounds."""
    from authgate.config import Settings

    return Settings(
        _env_file=None,
        jwt_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        user_store_backend="memory",
    )


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: datetime | None = None):
        self.now = now or datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """A clock frozen at the current time until advanced."""
    return FakeClock()


# =============================================================================
# Core Service Fixtures
# =============================================================================

@pytest.fixture
def hasher():
    """Password hasher with the minimum work factor for speed."""
    from authgate.core.security import PasswordHasher

    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service(settings, clock):
    """Token service driven by the fake clock."""
    from authgate.core.tokens import TokenService

    return TokenService(settings, clock=clock)


@pytest.fixture
def access_gate(token_service):
    from authgate.core.gate import AccessGate

    return AccessGate(token_service)


@pytest.fixture
def memory_store():
    """Fresh in-memory user store."""
    from authgate.database.stores import InMemoryUserStore

    return InMemoryUserStore()


@pytest.fixture
def auth_service(memory_store, hasher, token_service):
    from authgate.services.auth_service import AuthService

    return AuthService(store=memory_store, hasher=hasher, token_service=token_service)


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database."""
    yield mock_async_mongo_client["auth_db"]


@pytest_asyncio.fixture
async def mongo_store(mock_auth_db):
    """Mongo user store with indexes created like the real app."""
    from authgate.database.stores import MongoUserStore

    store = MongoUserStore(mock_auth_db)
    await store.initialize()
    yield store


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "username": "alice",
        "email": "a@x.com",
        "password": "secret1",
    }


@pytest.fixture
def test_user_credentials(test_user_data) -> dict:
    """Login body for the test user."""
    return {
        "email": test_user_data["email"],
        "password": test_user_data["password"],
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(settings, memory_store):
    """
    Create a FastAPI app for testing with its own secret and empty store.
    """
    from authgate.main import create_app

    return create_app(settings=settings, user_store=memory_store)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registered_client(client, test_user_data) -> TestClient:
    """A client whose app already has the test user registered."""
    response = client.post("/api/register", json=test_user_data)
    assert response.status_code == 201
    return client


@pytest.fixture
def bearer():
    """Build an Authorization header dict for a token."""
    def _bearer(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _bearer


@pytest.fixture
def auth_headers(registered_client, test_user_credentials, bearer) -> dict:
    """Authorization header for the registered test user."""
    response = registered_client.post("/api/login", json=test_user_credentials)
    assert response.status_code == 200
    return bearer(response.json()["token"])
