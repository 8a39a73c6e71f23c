"""User schemas: a person record with contact fields and a location."""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Body of POST /users. Every contact field is required by UserService."""
    username: str = ""
    phone: str = ""
    email: str = ""
    latitude: str = ""
    longitude: str = ""
    location: str = ""


class User(BaseModel):
    """
    What:  A stored user as returned by the /users endpoints.

    `id` never changes after creation. The location fields of the configured
    format are the only mutable part of a user (PATCH /users/{id}).
    """
    id: int = Field(description="Sequential identifier, starting at 1")
    username: str
    phone: str
    email: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location: Optional[str] = None
