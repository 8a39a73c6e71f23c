"""
AreaWatch Backend: User Route Handlers
========================================

What:  GET /users, GET /users/{user_id}, POST /users and
       PATCH /users/{user_id}.
How:   Same shape as routes/areas.py. The PATCH handler lives on its own
       router (`location_router`) so create_app() can leave it out when
       ENABLE_LOCATION_PATCH is off.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from areawatch.dependencies import (
    EMPTY_BODY_MESSAGE,
    get_user_service,
    json_body,
    user_id_param,
)
from areawatch.schemas.common import LocationUpdate
from areawatch.schemas.user import User, UserCreate
from areawatch.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])
location_router = APIRouter(tags=["Users"])


@router.get(
    "/users",
    response_model=List[User],
    response_model_exclude_none=True,
    summary="List all users",
)
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    return service.list_users()


@router.get(
    "/users/{user_id}",
    response_model=User,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Invalid user ID"},
        404: {"description": "User not found"},
    },
    summary="Get a single user by ID",
)
async def get_user(
    user_id: int = Depends(user_id_param),
    service: UserService = Depends(get_user_service),
) -> User:
    return service.get_user(user_id)


@router.post(
    "/users",
    status_code=201,
    response_model=User,
    response_model_exclude_none=True,
    responses={400: {"description": "Invalid request body or missing fields"}},
    summary="Create a user",
)
async def create_user(
    payload: UserCreate = Depends(json_body(UserCreate)),
    service: UserService = Depends(get_user_service),
) -> User:
    return service.create_user(payload)


@location_router.patch(
    "/users/{user_id}",
    response_model=User,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Invalid user ID, empty body or missing location fields"},
        404: {"description": "User not found"},
    },
    summary="Update a user's location",
)
async def update_user_location(
    user_id: int = Depends(user_id_param),
    payload: LocationUpdate = Depends(
        json_body(LocationUpdate, empty_message=EMPTY_BODY_MESSAGE, include_decoder_error=True)
    ),
    service: UserService = Depends(get_user_service),
) -> User:
    """
    Replace the location of one user and return the updated record.

    Split format expects {"latitude": ..., "longitude": ...};
    combined format expects {"location": ...}.
    """
    return service.update_location(user_id, payload)
