"""
AreaWatch Backend: Area Route Handlers
========================================

What:  GET /areas, GET /areas/{area_id}, POST /areas.
How:   Decodes the body into AreaCreate, delegates to AreaService, returns
       the stored record(s). Errors propagate to the global handlers in
       main.py (400 / 404, plain text).
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends

from areawatch.dependencies import area_id_param, get_area_service, json_body
from areawatch.schemas.area import Area, AreaCreate
from areawatch.services.area_service import AreaService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Areas"])


@router.get(
    "/areas",
    response_model=List[Area],
    response_model_exclude_none=True,
    summary="List all areas",
)
async def list_areas(service: AreaService = Depends(get_area_service)) -> List[Area]:
    return service.list_areas()


@router.get(
    "/areas/{area_id}",
    response_model=Union[Area, List[Area]],
    response_model_exclude_none=True,
    responses={
        400: {"description": "Invalid area ID"},
        404: {"description": "Area not found"},
    },
    summary="Get a single area by ID",
)
async def get_area(
    area_id: int = Depends(area_id_param),
    service: AreaService = Depends(get_area_service),
) -> Union[Area, List[Area]]:
    """
    Return one area.

    When AREA_ZERO_ID_LISTS_ALL is set, /areas/0 returns every area.
    """
    return service.get_area(area_id)


@router.post(
    "/areas",
    status_code=201,
    response_model=Area,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid request body or missing fields"}},
    summary="Create an area",
)
async def create_area(
    payload: AreaCreate = Depends(json_body(AreaCreate)),
    service: AreaService = Depends(get_area_service),
) -> Area:
    return service.create_area(payload)
