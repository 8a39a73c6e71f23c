"""
AreaWatch Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own AreaService / UserService (and therefore its own
       in-memory collections).
Who:   Called by uvicorn (`uvicorn areawatch.main:app`), by __main__.py and
       by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │   Req ID     │→│ Logging  │→│  CORS           │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /areas       │ │ /users   │ │ GET /health     │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers (plain-text bodies):            │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ NotFound→404 │ *→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from areawatch import __version__
from areawatch.config import Settings, settings
from areawatch.dependencies import INVALID_BODY_MESSAGE
from areawatch.exceptions import NotFoundError, ValidationError
from areawatch.middleware.logging import RequestLoggingMiddleware
from areawatch.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from areawatch.routes import areas, health, users
from areawatch.seed import seed_sample_data
from areawatch.services.area_service import AreaService
from areawatch.services.user_service import UserService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(app_settings: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout
    """
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings
    setup_logging(app_settings)

    logger.info("AreaWatch Backend starting up...")
    logger.info(
        "Location format: %s | area id 0 lists all: %s | location patch: %s",
        app_settings.location_format.value,
        app_settings.area_zero_id_lists_all,
        app_settings.enable_location_patch,
    )
    logger.info(
        "Server is running on http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )

    yield

    # Collections live only as long as the process
    logger.info(
        "AreaWatch Backend shutting down, discarding %d areas and %d users",
        len(app.state.area_service.store),
        len(app.state.user_service.store),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(message: str, status_code: int, headers: Optional[Dict[str, str]] = None) -> PlainTextResponse:
    response = PlainTextResponse(message, status_code=status_code, headers=headers)
    response.headers["X-Content-Type-Options"] = "nosniff"
    rid = request_id_var.get("")
    if rid:
        response.headers[REQUEST_ID_HEADER] = rid
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request ("Invalid request body")
        NotFoundError           → 404 Not Found
        HTTPException           → its own status (router 404 / 405)
        Exception (fallback)    → 500 Internal Server Error

    Every body is the plain-text message and nothing else.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc.message, 400)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Request rejected: %d validation error(s)", rid, len(exc.errors()))
        return error_response(INVALID_BODY_MESSAGE, 400)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(exc.message, 404)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(str(exc.detail), exc.status_code, getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response("Internal server error", 500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Each call builds fresh services, so every app (and every test) starts
    from its own collections, seeded when app_settings.seed_sample_data is on.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="AreaWatch API",
        description="In-memory geofenced areas and located users.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.started_at = time.time()
    app.state.area_service = AreaService(
        location_format=app_settings.location_format,
        zero_id_lists_all=app_settings.area_zero_id_lists_all,
    )
    app.state.user_service = UserService(location_format=app_settings.location_format)

    if app_settings.seed_sample_data:
        seed_sample_data(app.state.area_service, app.state.user_service)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(areas.router)
    app.include_router(users.router)
    if app_settings.enable_location_patch:
        app.include_router(users.location_router)
    app.include_router(health.router)

    return app


# uvicorn expects `areawatch.main:app` to be importable
app = create_app()
