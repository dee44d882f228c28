"""
Noteful Backend — Shared Response Schemas
==========================================

What:  Error and health payloads shared by every router.
Why:   Clients get one error shape for 400, 404 and 500 responses, and the
       OpenAPI docs describe it once.

Error shape:
    {"error": {"message": "Folder does not exist"}}
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    message: str = Field(description="Human-readable error description")
    detail: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Debug context, only present in development mode",
    )


class ErrorResponse(BaseModel):
    """Standardized error response for all API errors."""
    error: ErrorBody


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="Running environment")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
