"""
AreaWatch Backend: Area Service
=================================

What:  Business logic for the area collection: list, lookup, create.
How:   Wraps a RecordStore[Area]. Validates required fields according to
       the configured location format before handing a record to the store.
Who:   Called by routes/areas.py (via the get_area_service dependency) and
       by seed.py at startup.

Required fields:
    split:     name, latitude, longitude, radius
    combined:  name, location  (radius optional)
"""

import logging
from typing import List, Union

from areawatch.config import LocationFormat
from areawatch.exceptions import NotFoundError, ValidationError
from areawatch.schemas.area import Area, AreaCreate
from areawatch.store import RecordStore

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please provide a name and location"


class AreaService:
    """
    Business logic layer for area operations.

    Responsibilities:
        - list_areas(): Every area in insertion order
        - get_area(): Single area lookup with not-found handling
        - create_area(): Field validation and sequential id assignment
    """

    def __init__(
        self,
        location_format: LocationFormat = LocationFormat.SPLIT,
        zero_id_lists_all: bool = False,
    ):
        self.location_format = location_format
        self.zero_id_lists_all = zero_id_lists_all
        self.store: RecordStore[Area] = RecordStore("areas")

    def list_areas(self) -> List[Area]:
        return self.store.list()

    def get_area(self, area_id: int) -> Union[Area, List[Area]]:
        """
        Look up one area by id.

        With zero_id_lists_all enabled, id 0 returns the full list instead.

        Raises:
            NotFoundError: No stored area has this id
        """
        if area_id == 0 and self.zero_id_lists_all:
            return self.list_areas()

        area = self.store.get(area_id)
        if area is None:
            logger.debug("Area lookup miss: id=%d", area_id)
            raise NotFoundError(resource="area", resource_id=area_id)
        return area

    def create_area(self, payload: AreaCreate) -> Area:
        """
        Validate and store a new area.

        The identifier is taken from the store counter, so with no deletions
        it always equals the collection size before the call plus one.

        Raises:
            ValidationError: name or a required location/radius field is empty
        """
        if self.location_format is LocationFormat.SPLIT:
            required = (payload.name, payload.latitude, payload.longitude, payload.radius)
            fields = {
                "radius": payload.radius,
                "latitude": payload.latitude,
                "longitude": payload.longitude,
            }
        else:
            required = (payload.name, payload.location)
            fields = {
                "radius": payload.radius or None,
                "location": payload.location,
            }

        if not all(required):
            raise ValidationError(
                message=MISSING_FIELDS_MESSAGE,
                context={"location_format": self.location_format.value},
            )

        area = self.store.add(lambda area_id: Area(id=area_id, name=payload.name, **fields))
        logger.info("Created area id=%d name=%s", area.id, area.name)
        return area
