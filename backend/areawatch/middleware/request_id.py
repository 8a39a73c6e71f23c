"""
AreaWatch Backend: Request ID Middleware
==========================================

What:  Tags each area/user request with a short correlation id and echoes
       it in the X-Request-ID response header.
How:   Plain ASGI middleware. Uses the client's X-Request-ID header when
       present, otherwise the first 8 characters of a fresh UUID4. The id is
       stored in `request_id_var` and in scope["state"] (request.state).

The ContextVar is left set after the response so the 500 handler, which
runs in Starlette's ServerErrorMiddleware outside this one, can still put
the id on "Internal server error" responses. Those responses never pass
back through `send_with_request_id`.
"""

import uuid
from contextvars import ContextVar

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware:
    """Assigns a request id, exposes it to handlers and returns it to the client."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        rid = Headers(scope=scope).get(REQUEST_ID_HEADER) or new_request_id()
        request_id_var.set(rid)
        scope.setdefault("state", {})["request_id"] = rid

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                # error_response() may already have set it
                if REQUEST_ID_HEADER not in headers:
                    headers.append(REQUEST_ID_HEADER, rid)
            await send(message)

        await self.app(scope, receive, send_with_request_id)
