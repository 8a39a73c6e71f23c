# Services package init
"""
AreaWatch Backend: Services Layer
===================================

What:  Business logic sitting between routes (HTTP) and the in-memory stores.
How:   Each service owns one RecordStore, validates input and raises
       ValidationError / NotFoundError. Routes reach the services through
       FastAPI dependencies (see dependencies.py).

Service Inventory:
    - AreaService: list / get / create areas
    - UserService: list / get / create users, update a user's location
"""

from areawatch.services.area_service import AreaService
from areawatch.services.user_service import UserService

__all__ = ["AreaService", "UserService"]
