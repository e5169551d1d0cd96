"""
Blog API Backend: Document Store Client Tests
================================================

What:  Tests for BlogStore lifecycle and the get_blog_store dependency.
How:   Mock clients for ping outcomes; a real AsyncMongoClient only for URI
       parsing, which happens before any network I/O.

What we test:
    ✅ connect() logs success and marks the store connected
    ✅ connect() failures are logged, never raised
    ✅ Malformed connection string leaves the store without a client
    ✅ close() releases the client
    ✅ get_blog_store reads app.state
"""

import logging
from types import SimpleNamespace

import pytest
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from blog_api.config import Settings
from blog_api.database import BlogStore, get_blog_store
from blog_api.exceptions import DatabaseError


class TestBlogStoreConnect:

    @pytest.mark.asyncio
    async def test_connect_success_logs_and_flags(self, mock_mongo_client, caplog):
        store = BlogStore(client=mock_mongo_client)

        with caplog.at_level(logging.INFO, logger="blog_api.database"):
            await store.connect()

        assert store.connected is True
        mock_mongo_client.admin.command.assert_awaited_once_with("ping")
        assert "MongoDB connected" in caplog.text

    @pytest.mark.asyncio
    async def test_connect_failure_is_logged_not_raised(self, mock_mongo_client, caplog):
        mock_mongo_client.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("127.0.0.1:27017: connection refused")
        )
        store = BlogStore(client=mock_mongo_client)

        with caplog.at_level(logging.ERROR, logger="blog_api.database"):
            await store.connect()

        assert store.connected is False
        assert "MongoDB connection error" in caplog.text
        # The handle still serves requests; the driver reports per-operation errors
        assert store.blogs is not None

    @pytest.mark.asyncio
    async def test_malformed_url_leaves_store_unavailable(self, caplog):
        store = BlogStore(config=Settings(mongo_url="http://not-mongo/"))

        with caplog.at_level(logging.ERROR, logger="blog_api.database"):
            await store.connect()

        assert store.connected is False
        assert "MongoDB connection error" in caplog.text
        with pytest.raises(DatabaseError, match="not available"):
            store.blogs

    @pytest.mark.asyncio
    async def test_close_releases_client(self, mock_mongo_client):
        store = BlogStore(client=mock_mongo_client)
        await store.connect()

        await store.close()

        mock_mongo_client.close.assert_awaited_once()
        assert store.connected is False
        assert await store.ping() is False


class TestBlogStorePing:

    @pytest.mark.asyncio
    async def test_ping_ok(self, blog_store):
        assert await blog_store.ping() is True

    @pytest.mark.asyncio
    async def test_ping_failure(self, mock_mongo_client):
        mock_mongo_client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))
        store = BlogStore(client=mock_mongo_client)

        assert await store.ping() is False


class TestBlogsCollection:

    def test_collection_uses_configured_names(self, mock_mongo_client):
        config = Settings(mongo_db_name="newDatabase", mongo_collection="blogs")
        store = BlogStore(config=config, client=mock_mongo_client)

        store.blogs

        mock_mongo_client.__getitem__.assert_called_with("newDatabase")
        mock_mongo_client.__getitem__.return_value.__getitem__.assert_called_with("blogs")

    def test_describe(self, blog_store):
        summary = blog_store.describe()

        assert summary["collection"] == "blogs"
        assert summary["connected"] is False


class TestGetBlogStore:

    def test_returns_handle_from_app_state(self, blog_store):
        request = MagicMock()
        request.app.state = SimpleNamespace(blog_store=blog_store)

        assert get_blog_store(request) is blog_store

    def test_missing_handle_raises(self):
        request = MagicMock()
        request.app.state = SimpleNamespace()

        with pytest.raises(DatabaseError):
            get_blog_store(request)
