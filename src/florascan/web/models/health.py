"""Health check API response models."""

from typing import Any

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response for the health check endpoint."""

    status: str = Field(..., description="Health status (healthy/degraded)")
    timestamp: str = Field(..., description="ISO timestamp of health check")
    version: str = Field(..., description="Application version")
    service: str = Field(..., description="Service name")
    checks: dict[str, Any] = Field(default_factory=dict, description="Component checks")
