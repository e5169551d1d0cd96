"""
Blog API Backend: Document Store Client
==========================================

What:  Async MongoDB client handle, collection access, and FastAPI dependency.
Why:   An explicit handle on app.state, instead of a module-level client, so
       tests can swap it through dependency overrides and shutdown can close it.
How:   `BlogStore` owns one pymongo `AsyncMongoClient` for the process lifetime.
       The application lifespan acquires it at startup (`connect`) and releases
       it at shutdown (`close`); routes receive it through `get_blog_store`.
Who:   Created by main.lifespan; used by BlogService via route dependencies.
When:  One handle per process; the driver pools connections underneath.

Connection Policy:
    connect() pings the server once and logs the outcome. A failed ping is
    logged and otherwise ignored: the app keeps serving and each request hits
    the driver, which reports its own error. There is no retry, backoff or
    reconnection logic beyond what the driver does on its own.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from blog_api.config import Settings, settings as default_settings
from blog_api.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class BlogStore:
    """
    Explicitly owned handle to the blog collection.

    Lifecycle:
        store = BlogStore()
        await store.connect()   # startup: build client + ping (non-fatal)
        store.blogs             # request time: collection handle
        await store.close()     # shutdown: release client and pool

    Attributes:
        connected: True once a ping has succeeded. Informational only;
                   operations are attempted regardless.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        client: Optional[AsyncMongoClient] = None,
    ):
        self._config = config or default_settings
        self._client: Optional[AsyncMongoClient] = client
        self.connected = False

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def connect(self) -> None:
        """
        Open the client and verify the server answers.

        Failures (malformed connection string, unreachable server) are
        logged at ERROR level and swallowed so startup continues.
        """
        try:
            if self._client is None:
                self._client = AsyncMongoClient(
                    self._config.mongo_url,
                    serverSelectionTimeoutMS=self._config.mongo_server_selection_timeout_ms,
                )
            await self._client.admin.command("ping")
        except (PyMongoError, ValueError) as e:
            self.connected = False
            logger.error("MongoDB connection error: %s", str(e))
            return

        self.connected = True
        logger.info(
            "MongoDB connected: %s/%s",
            self._config.mongo_url,
            self._config.mongo_db_name,
        )

    async def close(self) -> None:
        """Close the client and every pooled connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
        self.connected = False
        logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        """Lightweight liveness probe (used by GET /health)."""
        if self._client is None:
            return False
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False
        return True

    # ── Collection Access ─────────────────────────────────────────────────

    @property
    def blogs(self) -> AsyncCollection:
        """
        The blog post collection.

        Raises:
            DatabaseError: the client was never built (connect() failed
                           before a client existed, or close() ran).
        """
        if self._client is None:
            raise DatabaseError(message="Database connection is not available")
        return self._client[self._config.mongo_db_name][self._config.mongo_collection]

    def describe(self) -> Dict[str, Any]:
        """Connection summary for startup logs."""
        return {
            "database": self._config.mongo_db_name,
            "collection": self._config.mongo_collection,
            "connected": self.connected,
        }


# ── Store Dependency ──────────────────────────────────────────────────────
def get_blog_store(request: Request) -> BlogStore:
    """
    FastAPI dependency returning the process-wide store handle.

    The handle is placed on `app.state.blog_store` by the lifespan. Tests
    replace this dependency through `app.dependency_overrides`.

    Example usage in a route:
        @router.get("/blogs")
        async def list_blogs(store: BlogStore = Depends(get_blog_store)):
            ...
    """
    store = getattr(request.app.state, "blog_store", None)
    if store is None:
        raise DatabaseError(message="Database connection is not available")
    return store
