"""
Palette Picker Backend — Shared Schemas
=========================================

What:  Error and health response models used across routes.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body for every failing request.

    Example:
        {"error": "A project with the id of -100 does not exist."}

    For store failures `error` carries the driver's own message.
    """
    error: Any = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="Active database profile")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
