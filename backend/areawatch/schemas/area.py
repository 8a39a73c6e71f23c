"""Area schemas: a named circular geofence with a center location and radius."""

from typing import Optional

from pydantic import BaseModel, Field


class AreaCreate(BaseModel):
    """
    What:  Body of POST /areas.
    Who:   Decoded by the json_body dependency; required fields are checked
           by AreaService.

    Unknown keys (including a client-supplied `id`) are ignored.
    """
    name: str = Field(default="", description="Display name of the area")
    radius: str = Field(default="", description="Radius in meters, as a string")
    latitude: str = Field(default="", description="Center latitude (split format)")
    longitude: str = Field(default="", description="Center longitude (split format)")
    location: str = Field(default="", description="Center as 'lat, lon' (combined format)")


class Area(BaseModel):
    """
    What:  A stored area as returned by GET /areas, GET /areas/{id} and POST /areas.

    Only the location fields of the configured format are set; the rest stay
    None and are dropped on serialization. In the combined format `radius` is
    optional and is None when the client did not send one.
    """
    id: int = Field(description="Sequential identifier, starting at 1")
    name: str
    radius: Optional[str] = Field(default=None, description="Radius in meters")
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location: Optional[str] = None
