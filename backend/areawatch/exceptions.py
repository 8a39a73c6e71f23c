"""
AreaWatch Backend: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the two ways a request can fail.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return a plain-text body holding the message, with the matching
       HTTP status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    AreaWatchError (base)
    ├── ValidationError   → 400 Bad Request (malformed id, body or fields)
    └── NotFoundError     → 404 Not Found (no record with that id)

The response body is only ever `message`. `context` is for logs.
"""

from typing import Any, Dict, Optional


class AreaWatchError(Exception):
    """
    Base exception for all AreaWatch application errors.

    Attributes:
        message:  User-facing error description (returned as the response body)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(AreaWatchError):
    """
    Raised when client input fails validation.

    When:    Non-integer path id, empty or undecodable body, empty required field.
    HTTP:    400 Bad Request

    Example response body:
        Please provide a name and location
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(AreaWatchError):
    """
    Raised when a requested record does not exist.

    When:    GET /areas/{id}, GET /users/{id} or PATCH /users/{id} with an
             id no stored record carries.
    HTTP:    404 Not Found

    The message is "<Resource> not found", e.g. "Area not found".
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
