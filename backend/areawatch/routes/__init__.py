# Routes package init
"""
AreaWatch Backend: API Routes Package
=======================================

Route Inventory:
    - areas.py:   GET  /areas
                  GET  /areas/{area_id}
                  POST /areas
    - users.py:   GET  /users
                  GET  /users/{user_id}
                  POST /users
                  PATCH /users/{user_id}   (location_router, optional)
    - health.py:  GET  /health

Routes stay thin: decode, call the service, return. Status codes for
failures come from the exception handlers in main.py.
"""
