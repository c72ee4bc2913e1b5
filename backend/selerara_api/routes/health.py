"""
Selerara Dashboard API — Health Check Routes
==============================================

What:  Liveness (/health) and database reachability (/db-health) probes.
Who:   Docker health checks, the load balancer and the dashboard status page.

Why two endpoints:
    /health answers as long as the process serves requests, so an orchestrator
    does not restart a healthy container because MySQL is down.
    /db-health checks out a pooled connection and pings it; a failure there
    is a database problem, not an application one.
"""

import logging

from fastapi import APIRouter, Depends

from selerara_api.database import Database, get_database
from selerara_api.exceptions import DatabaseUnavailableError
from selerara_api.schemas.common import DatabaseHealthResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="OK")


@router.get(
    "/db-health",
    response_model=DatabaseHealthResponse,
    responses={
        500: {"description": "Database unreachable", "model": DatabaseHealthResponse},
    },
    summary="Database connection check endpoint",
)
async def db_health_check(
    database: Database = Depends(get_database),
) -> DatabaseHealthResponse:
    """
    Pings the database through the pool.

    Raises:
        DatabaseUnavailableError: rendered as 500 {"status": "ERROR", "message": ...}
    """
    try:
        await database.ping()
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        raise DatabaseUnavailableError.from_exception(e)
    return DatabaseHealthResponse(status="OK", message="Database connection is successful")
