"""
AreaWatch Backend: Health Check Route
=======================================

What:  Health check endpoint for monitoring and container health checks.
How:   The service has no external dependencies, so it is healthy whenever
       it can answer. The response also reports collection sizes and the
       configured location format.
"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from areawatch import __version__
from areawatch.dependencies import get_area_service, get_user_service
from areawatch.schemas.common import HealthResponse
from areawatch.services.area_service import AreaService
from areawatch.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    areas: AreaService = Depends(get_area_service),
    users: UserService = Depends(get_user_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        location_format=areas.location_format.value,
        areas=len(areas.store),
        users=len(users.store),
        uptime_seconds=round(time.time() - request.app.state.started_at, 2),
    )
