"""
Blog API Backend: Health Check Route
=======================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings the document store and reports the result with uptime and version.
Who:   Called by Docker health checks and monitoring systems.

Status levels:
    - healthy:   store answered the ping
    - unhealthy: store did not answer

Why always 200:
    A store outage does not stop the process from serving pages and answering
    requests, so the probe reports "unhealthy" in the body instead of failing.
    Restarting the container would not bring the store back.
"""

import logging
import time

from fastapi import APIRouter, Depends

from blog_api import __version__
from blog_api.database import BlogStore, get_blog_store
from blog_api.schemas.blog import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the backend and its document store.",
)
async def health_check(store: BlogStore = Depends(get_blog_store)) -> HealthResponse:
    """Ping the store and report aggregate status."""
    if await store.ping():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        logger.warning("Health check: document store unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
