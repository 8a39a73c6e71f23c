"""
AreaWatch Backend: Request Logging Middleware
===============================================

What:  One access-log line per area/user request on the `areawatch.access`
       logger.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address, plus the collection the request
       addressed ("areas" / "users") and the raw record id segment when the
       path has one. Level follows the status code:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Request bodies are never logged.
"""

import logging
import time
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from areawatch.middleware.request_id import request_id_var

logger = logging.getLogger("areawatch.access")

RESOURCES = {"areas", "users"}


def resource_from_path(path: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Split a request path into (resource, record id).

        /areas      → ("areas", None)
        /users/42   → ("users", "42")
        /health     → (None, None)

    The record id is the raw segment, so "/areas/abc" logs "abc".
    """
    segments = [segment for segment in path.split("/") if segment]
    if not segments or segments[0] not in RESOURCES:
        return None, None
    record_id = segments[1] if len(segments) > 1 else None
    return segments[0], record_id


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request to the area and user collections."""

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        resource, record_id = resource_from_path(path)
        target = resource or "-"
        if record_id is not None:
            target = f"{target}#{record_id}"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        rid = request_id_var.get("")
        logger.log(
            log_level,
            "%s %s %d %.1fms %s [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            target,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "resource": resource,
                "record_id": record_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
