"""
Blog API Backend: Demo API Fetch
===================================

What:  Fetches the third-party placeholder users endpoint and logs the result.
Why:   Demonstrates an outbound call from a page without making the page
       depend on it: a slow or failing demo API never delays or breaks /home.
How:   One GET through httpx.AsyncClient with the configured timeout. The
       JSON body (or the error) goes to the log; nothing is returned to a user.
Who:   Scheduled as a background task by GET /home (routes/shell.py).
When:  Once per home page render, after the response is sent.

This has no coupling to the blog service or its store.
"""

import logging
from typing import Any, Optional

import httpx

from blog_api.config import settings

logger = logging.getLogger(__name__)


class DemoService:
    """Fire-and-log client for the demo API."""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url or settings.demo_api_url
        self.timeout = timeout if timeout is not None else settings.demo_api_timeout

    async def fetch_and_log(self, client: Optional[httpx.AsyncClient] = None) -> Optional[Any]:
        """
        GET the demo endpoint and log what came back.

        Args:
            client: Optional pre-built client (tests pass one with a MockTransport).

        Returns:
            The decoded JSON body, or None when the request failed. Errors
            are logged and never raised.
        """
        try:
            if client is None:
                async with httpx.AsyncClient(timeout=self.timeout) as owned:
                    data = await self._get(owned)
            else:
                data = await self._get(client)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Demo API fetch from %s failed: %s", self.url, str(e))
            return None

        logger.info("Demo API response: %s", data)
        return data

    async def _get(self, client: httpx.AsyncClient) -> Any:
        response = await client.get(self.url)
        response.raise_for_status()
        return response.json()


demo_service = DemoService()
