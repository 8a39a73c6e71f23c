"""Schemas shared across resources: the location patch body and the health check."""

from pydantic import BaseModel, Field


class LocationUpdate(BaseModel):
    """
    What:  Body of PATCH /users/{id}.

    Split format reads latitude + longitude, combined format reads location.
    Values are accepted as any non-empty string; no numeric check is made.
    """
    latitude: str = ""
    longitude: str = ""
    location: str = ""


class HealthResponse(BaseModel):
    """
    What:  Health check response with service status and collection sizes.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy")
    version: str = Field(description="Application version")
    location_format: str = Field(description="Configured location representation")
    areas: int = Field(description="Number of stored areas")
    users: int = Field(description="Number of stored users")
    uptime_seconds: float = Field(description="Seconds since the application was created")
