"""
AreaWatch Backend: Sample Data
================================

What:  The fixed rows every fresh application instance starts with.
How:   Rows go through AreaService.create_area / UserService.create_user,
       so they are validated and numbered exactly like client-created
       records (areas 1-3, users 1-5).
When:  Once, from create_app(), when Settings.seed_sample_data is on.
"""

import logging

from areawatch.config import LocationFormat
from areawatch.schemas.area import AreaCreate
from areawatch.schemas.user import UserCreate
from areawatch.services.area_service import AreaService
from areawatch.services.user_service import UserService

logger = logging.getLogger(__name__)

# (name, radius in meters, latitude, longitude)
SAMPLE_AREAS = [
    ("Brisbane", "42", "-27.492887", "153.055914"),
    ("Sydney", "37", "-33.837386", "151.059379"),
    ("Melbourne", "53", "-37.822437", "145.011258"),
]

# (username, email, phone, latitude, longitude)
SAMPLE_USERS = [
    ("alice", "alice@example.com", "0488079008", "-27.492887", "153.055914"),
    ("bob", "bob@example.com", "0488079009", "-33.837386", "151.059379"),
    ("peter", "peter@example.com", "0488079010", "-37.822437", "145.011258"),
    ("paul", "paul@example.com", "0488079011", "-27.492887", "153.055914"),
    ("daniel", "daniel@example.com", "0488079012", "-37.822437", "145.011258"),
]


def format_location(latitude: str, longitude: str) -> str:
    """Render a coordinate pair in the combined "lat, lon" form."""
    return f"{latitude}, {longitude}"


def _location_kwargs(location_format: LocationFormat, latitude: str, longitude: str) -> dict:
    if location_format is LocationFormat.SPLIT:
        return {"latitude": latitude, "longitude": longitude}
    return {"location": format_location(latitude, longitude)}


def seed_sample_data(area_service: AreaService, user_service: UserService) -> None:
    """Load SAMPLE_AREAS and SAMPLE_USERS into the given services."""
    for name, radius, latitude, longitude in SAMPLE_AREAS:
        area_service.create_area(
            AreaCreate(
                name=name,
                radius=radius,
                **_location_kwargs(area_service.location_format, latitude, longitude),
            )
        )

    for username, email, phone, latitude, longitude in SAMPLE_USERS:
        user_service.create_user(
            UserCreate(
                username=username,
                email=email,
                phone=phone,
                **_location_kwargs(user_service.location_format, latitude, longitude),
            )
        )

    logger.info(
        "Seeded %d areas and %d users",
        len(area_service.store),
        len(user_service.store),
    )
