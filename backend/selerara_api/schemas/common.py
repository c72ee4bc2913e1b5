"""
Selerara Dashboard API — Shared Response Schemas
==================================================

What:  Health and error payloads shared by every router.
Why:   Declared once so the OpenAPI document shows the same error shape for
       every endpoint.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Returned by GET /health. Liveness only: never touches the database."""
    status: str = Field(description="Always 'OK' when the process is serving requests")


class DatabaseHealthResponse(BaseModel):
    """
    What:  Returned by GET /db-health.
    Why:   Load balancers and the dashboard status page probe the pool separately
           from the process so that a database outage is visible on its own.
    """
    status: str = Field(description="'OK' when a pooled connection answered a ping, 'ERROR' otherwise")
    message: str = Field(description="Human-readable outcome, or the driver's error message")


class ErrorResponse(BaseModel):
    """
    What:  Body of every failed data endpoint (HTTP 500).

    Example:
        {"error": "(2003, \"Can't connect to MySQL server on 'db'\")"}
    """
    error: str = Field(description="Error message reported by the database driver")
