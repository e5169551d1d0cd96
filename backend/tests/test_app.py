"""
Blog API Backend: Application Wiring Tests
=============================================

What:  Lifespan, health route, and exception-handler wiring of the FastAPI app.

What we test:
    ✅ Lifespan publishes the store on app.state and closes it on shutdown
    ✅ Startup survives a store that cannot be reached
    ✅ /health reports connected / disconnected
    ✅ Missing store handle surfaces as 500 {error}
"""

import pytest
from unittest.mock import AsyncMock, patch

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

from blog_api import __version__
from blog_api.main import app, create_app, lifespan


class TestLifespan:

    @pytest.mark.asyncio
    async def test_store_acquired_and_released(self):
        target = FastAPI()
        with patch("blog_api.main.setup_logging"), \
             patch("blog_api.main.BlogStore") as store_cls:
            store = store_cls.return_value
            store.connect = AsyncMock()
            store.close = AsyncMock()
            store.describe.return_value = {"connected": True}

            async with lifespan(target):
                assert target.state.blog_store is store
                store.connect.assert_awaited_once()
                store.close.assert_not_awaited()

        store.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_startup_survives_unreachable_store(self, mock_mongo_client):
        mock_mongo_client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))
        target = FastAPI()

        with patch("blog_api.main.setup_logging"), \
             patch("blog_api.database.AsyncMongoClient", return_value=mock_mongo_client):
            async with lifespan(target):
                assert target.state.blog_store.connected is False

        mock_mongo_client.close.assert_awaited_once()


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_connected(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["version"] == __version__

    @pytest.mark.asyncio
    async def test_health_disconnected(self, test_client, mock_mongo_client):
        mock_mongo_client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))

        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"


class TestWiring:

    def test_routes_registered(self):
        api_paths = set(app.openapi()["paths"])

        assert {"/blogs", "/blogs/{blog_id}", "/health"} <= api_paths
        assert app.url_path_for("index") == "/"
        assert app.url_path_for("home") == "/home"

    @pytest.mark.asyncio
    async def test_missing_store_handle_is_500(self):
        fresh = create_app()
        transport = ASGITransport(app=fresh)

        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/blogs")

        assert response.status_code == 500
        assert response.json() == {"error": "Database connection is not available"}
