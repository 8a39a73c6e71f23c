"""
AreaWatch Backend: User Service
=================================

What:  Business logic for the user collection: list, lookup, create and
       location update.
How:   Wraps a RecordStore[User]. Field checks follow the configured
       location format, exactly as AreaService does for areas.
Who:   Called by routes/users.py and by seed.py at startup.
"""

import logging
from typing import Dict, List

from areawatch.config import LocationFormat
from areawatch.exceptions import NotFoundError, ValidationError
from areawatch.schemas.common import LocationUpdate
from areawatch.schemas.user import User, UserCreate
from areawatch.store import RecordStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Username, Phone, Location and Email are required"
MISSING_COORDINATES_MESSAGE = "Both latitude and longitude fields are required in the request body"
MISSING_LOCATION_MESSAGE = "The location field is required in the request body"


class UserService:
    """
    Business logic layer for user operations.

    Responsibilities:
        - list_users(): Every user in insertion order
        - get_user(): Strict lookup by id (no id-0 shortcut)
        - create_user(): Field validation and sequential id assignment
        - update_location(): Replace a user's location fields
    """

    def __init__(self, location_format: LocationFormat = LocationFormat.SPLIT):
        self.location_format = location_format
        self.store: RecordStore[User] = RecordStore("users")

    def list_users(self) -> List[User]:
        return self.store.list()

    def get_user(self, user_id: int) -> User:
        user = self.store.get(user_id)
        if user is None:
            logger.debug("User lookup miss: id=%d", user_id)
            raise NotFoundError(resource="user", resource_id=user_id)
        return user

    def create_user(self, payload: UserCreate) -> User:
        """
        Validate and store a new user.

        Raises:
            ValidationError: username, phone, email or a location field is empty
        """
        location = self._location_fields(payload.latitude, payload.longitude, payload.location)
        required = (payload.username, payload.email, payload.phone, *location.values())
        if not all(required):
            raise ValidationError(message=MISSING_FIELDS_MESSAGE)

        user = self.store.add(
            lambda user_id: User(
                id=user_id,
                username=payload.username,
                phone=payload.phone,
                email=payload.email,
                **location,
            )
        )
        logger.info("Created user id=%d username=%s", user.id, user.username)
        return user

    def update_location(self, user_id: int, payload: LocationUpdate) -> User:
        """
        Overwrite the location fields of one user.

        Any non-empty string is accepted; coordinates are not parsed. Applying
        the same update twice leaves the same stored state.

        Raises:
            ValidationError: A location field in the body is empty
            NotFoundError: No stored user has this id
        """
        changes = self._location_fields(payload.latitude, payload.longitude, payload.location)
        if not all(changes.values()):
            if self.location_format is LocationFormat.SPLIT:
                raise ValidationError(message=MISSING_COORDINATES_MESSAGE)
            raise ValidationError(message=MISSING_LOCATION_MESSAGE, field="location")

        user = self.store.update(user_id, changes)
        if user is None:
            raise NotFoundError(resource="user", resource_id=user_id)

        logger.info("Updated location of user id=%d", user.id)
        return user

    def _location_fields(self, latitude: str, longitude: str, location: str) -> Dict[str, str]:
        if self.location_format is LocationFormat.SPLIT:
            return {"latitude": latitude, "longitude": longitude}
        return {"location": location}
