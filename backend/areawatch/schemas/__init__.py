"""
AreaWatch Backend: Pydantic Request/Response Schemas
======================================================

What:  The API contract for areas, users and the health check.
How:   FastAPI validates request bodies against the *Create / LocationUpdate
       models and serializes stored records through Area / User.

Location fields:
    Records carry either `latitude` + `longitude` or a single `location`,
    depending on Settings.location_format. All location fields are declared
    optional here; the services decide which ones are required and store
    only those. Routes serialize with exclude_none so the unused fields
    never reach the client.

Missing string fields decode to "" (never None), so "absent" and "empty"
are rejected by the same required-field check in the service layer.
"""

from areawatch.schemas.area import Area, AreaCreate
from areawatch.schemas.common import HealthResponse, LocationUpdate
from areawatch.schemas.user import User, UserCreate

__all__ = [
    "Area",
    "AreaCreate",
    "HealthResponse",
    "LocationUpdate",
    "User",
    "UserCreate",
]
