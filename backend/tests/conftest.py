"""
Blog API Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── fake_collection: In-memory stand-in for a pymongo AsyncCollection
    ├── mock_mongo_client: MagicMock client whose [db][collection] is fake_collection
    ├── blog_store: Real BlogStore wrapping mock_mongo_client
    ├── sample_blog_data: Field values for a complete post
    └── test_client: HTTPX AsyncClient against the FastAPI app, store overridden

No test talks to a real MongoDB server.
"""

import os
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; pin them before importing the app
os.environ["MONGO_URL"] = "mongodb://127.0.0.1:27017"
os.environ["MONGO_DB_NAME"] = "blog_test"
os.environ["MONGO_SERVER_SELECTION_TIMEOUT_MS"] = "200"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.results import InsertOneResult

from blog_api.config import settings
from blog_api.database import BlogStore, get_blog_store


# ══════════════════════════════════════════════════════════════════════════
# In-memory collection
# ══════════════════════════════════════════════════════════════════════════

class FakeCursor:
    """Mimics AsyncCursor.to_list() over a snapshot of documents."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        docs = [dict(doc) for doc in self._documents]
        return docs if length is None else docs[:length]


class FakeCollection:
    """
    The three collection methods BlogService uses, backed by a list.

    insert_one assigns an ObjectId `_id` on the passed document the way the
    driver does. Documents are kept in insertion order.
    """

    def __init__(self):
        self.documents: List[Dict[str, Any]] = []

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return InsertOneResult(document["_id"], acknowledged=True)

    def find(self, filter: Optional[Dict[str, Any]] = None) -> FakeCursor:
        return FakeCursor(list(self.documents))

    async def find_one_and_delete(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for index, doc in enumerate(self.documents):
            if doc["_id"] == filter["_id"]:
                return self.documents.pop(index)
        return None


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def mock_mongo_client(fake_collection):
    """
    Provides a mock AsyncMongoClient.

    client[db][collection] resolves to fake_collection; admin.command
    (used for ping) succeeds; close() is awaitable.
    """
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = fake_collection
    client.admin.command = AsyncMock(return_value={"ok": 1.0})
    client.close = AsyncMock()
    return client


@pytest.fixture
def blog_store(mock_mongo_client):
    return BlogStore(config=settings, client=mock_mongo_client)


@pytest.fixture
def sample_blog_data():
    return {
        "author": "A",
        "articleHeading": "H",
        "content": "C",
    }


@pytest_asyncio.fixture
async def test_client(blog_store):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so the store dependency is
    overridden with the blog_store fixture instead.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/blogs")
            assert response.status_code == 200
    """
    from blog_api.main import app

    app.dependency_overrides[get_blog_store] = lambda: blog_store
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_blog_store, None)
