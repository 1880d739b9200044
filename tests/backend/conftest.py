"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for failure
injection in the user store and for token forging.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# User Store Mocks
# =============================================================================

@pytest.fixture
def mock_user_store():
    """
    Create a fully mocked UserStore.

    All methods are AsyncMock, allowing you to configure return values:

        mock_user_store.find_by_email.return_value = record
    """
    store = MagicMock()
    store.find_by_email_or_username = AsyncMock(return_value=None)
    store.find_by_email = AsyncMock(return_value=None)
    store.find_by_id = AsyncMock(return_value=None)
    store.insert = AsyncMock()
    store.list_all = AsyncMock(return_value=[])
    store.ping = AsyncMock()
    return store


@pytest.fixture
def mock_auth_service(mock_user_store, hasher, token_service):
    """AuthService wired to the mocked store."""
    from authgate.services.auth_service import AuthService

    return AuthService(store=mock_user_store, hasher=hasher, token_service=token_service)


# =============================================================================
# Token Helpers
# =============================================================================

@pytest.fixture
def forge_token(settings):
    """
    Sign arbitrary claims with the test secret (or another secret).

    Usage:
        token = forge_token({"id": 1}, secret="other-secret")
    """
    from jose import jwt

    def _forge(claims: dict, secret: str | None = None) -> str:
        return jwt.encode(claims, secret or settings.jwt_secret_key, algorithm="HS256")

    return _forge


@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "error" in data
        if message:
            assert data["error"] == message
    return _assert
