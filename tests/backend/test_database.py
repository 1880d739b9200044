"""
Tests for database connections and user store selection.

These tests cover:
- MongoDB client creation and cleanup
- Backend selection from settings
"""

import pytest
from unittest.mock import MagicMock, patch


class TestMongoDBConnection:
    """Tests for MongoDB connection handling."""

    def test_get_mongo_client_creates_connection_once(self, settings):
        """get_mongo_client should create the client on first call only."""
        import authgate.database.connections as conn_module

        with patch("authgate.database.connections.AsyncIOMotorClient") as mock_client, \
             patch.object(conn_module, "_mongo_client", None):

            mock_instance = MagicMock()
            mock_client.return_value = mock_instance

            first = conn_module.get_mongo_client(settings)
            second = conn_module.get_mongo_client(settings)

            mock_client.assert_called_once_with(settings.mongo_uri, tz_aware=True)
            assert first is second is mock_instance

    @pytest.mark.asyncio
    async def test_close_connections_cleans_up(self):
        """close_connections should close and forget the client."""
        import authgate.database.connections as conn_module

        mock_mongo = MagicMock()
        conn_module._mongo_client = mock_mongo

        await conn_module.close_connections()

        mock_mongo.close.assert_called_once()
        assert conn_module._mongo_client is None


class TestBuildUserStore:
    """Tests for build_user_store backend selection."""

    def test_memory_backend(self, settings):
        from authgate.database.connections import build_user_store
        from authgate.database.stores import InMemoryUserStore

        assert isinstance(build_user_store(settings), InMemoryUserStore)

    def test_mongo_backend_uses_configured_database(self, settings):
        from authgate.database.connections import build_user_store
        from authgate.database.stores import MongoUserStore

        mongo_settings = settings.model_copy(
            update={"user_store_backend": "mongo", "mongo_db_name": "auth_test"}
        )
        mock_client = MagicMock()

        with patch(
            "authgate.database.connections.get_mongo_client", return_value=mock_client
        ):
            store = build_user_store(mongo_settings)

        assert isinstance(store, MongoUserStore)
        mock_client.__getitem__.assert_called_once_with("auth_test")
