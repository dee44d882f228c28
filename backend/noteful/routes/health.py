"""
Noteful Backend — Health Check Route
=====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 against the app's database and reports the result.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (still HTTP 200, body says why)
"""

import logging
import time

from fastapi import APIRouter, Request

from noteful import __version__
from noteful.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """Probe the database and report aggregate status and uptime."""
    db_status = "connected"
    overall = "healthy"

    try:
        await request.app.state.database.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        environment=request.app.state.settings.environment,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
