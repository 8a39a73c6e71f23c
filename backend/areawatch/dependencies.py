"""
AreaWatch Backend: Request Dependencies
=========================================

What:  FastAPI dependencies for everything a route handler needs from the
       request: the services owned by the app, the record id from the path
       and the decoded JSON body.
Who:   Used by route handlers via Depends(...).

Order matters:
    FastAPI resolves a handler's dependencies in declaration order, and the
    first ValidationError stops the request. Handlers therefore declare the
    path id before the body, so a bad id is reported even when the body is
    bad too.

Path ids:
    Only an optional sign followed by ASCII digits, within the signed 64-bit
    range, is an id. "1.0", " 1", "1_0" and "0x1" are all rejected with
    400 "Invalid <resource> ID".

Bodies:
    The raw body is decoded as JSON whatever the Content-Type header says.
    A JSON `null` decodes like `{}`; unknown keys are ignored.
"""

import json
import re
from typing import Callable, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from areawatch.exceptions import ValidationError
from areawatch.services.area_service import AreaService
from areawatch.services.user_service import UserService

ModelT = TypeVar("ModelT", bound=BaseModel)

IDENTIFIER_PATTERN = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

EMPTY_BODY_MESSAGE = "Request body cannot be empty"
INVALID_BODY_MESSAGE = "Invalid request body"


# ── Services ──────────────────────────────────────────────────────────────

def get_area_service(request: Request) -> AreaService:
    return request.app.state.area_service


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


# ── Path ids ──────────────────────────────────────────────────────────────

def parse_identifier(raw: str, resource: str) -> int:
    """
    Parse a path segment as a record id.

    Raises:
        ValidationError: "Invalid <resource> ID" for anything but a signed
                         decimal integer that fits in 64 bits
    """
    if IDENTIFIER_PATTERN.fullmatch(raw) is None:
        raise ValidationError(message=f"Invalid {resource} ID", field=f"{resource}_id")

    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValidationError(
            message=f"Invalid {resource} ID",
            field=f"{resource}_id",
            context={"reason": "out of range"},
        )
    return value


def area_id_param(area_id: str) -> int:
    return parse_identifier(area_id, "area")


def user_id_param(user_id: str) -> int:
    return parse_identifier(user_id, "user")


# ── Bodies ────────────────────────────────────────────────────────────────

def decode_body(
    raw: bytes,
    model: Type[ModelT],
    empty_message: str = INVALID_BODY_MESSAGE,
    include_decoder_error: bool = False,
) -> ModelT:
    """
    Decode a raw request body into `model`.

    Args:
        raw: Body bytes as received
        model: Pydantic schema to validate against
        empty_message: Message for an empty (or whitespace-only) body
        include_decoder_error: Append the JSON decoder's message to
                               "Invalid request body: ..." for malformed JSON

    Raises:
        ValidationError: Empty body, malformed JSON, or a value of the wrong
                         JSON type (e.g. a number where a string belongs)
    """
    if not raw.strip():
        raise ValidationError(message=empty_message)

    try:
        data = json.loads(raw)
    except ValueError as exc:
        detail = getattr(exc, "msg", str(exc))
        message = f"{INVALID_BODY_MESSAGE}: {detail}" if include_decoder_error else INVALID_BODY_MESSAGE
        raise ValidationError(message=message, context={"decoder": detail}) from exc

    if data is None:
        data = {}

    try:
        return model.model_validate(data)
    except SchemaValidationError as exc:
        raise ValidationError(
            message=INVALID_BODY_MESSAGE,
            context={"errors": exc.error_count()},
        ) from exc


def json_body(
    model: Type[ModelT],
    empty_message: str = INVALID_BODY_MESSAGE,
    include_decoder_error: bool = False,
) -> Callable:
    """Build a dependency that reads the request body and decodes it into `model`."""

    async def dependency(request: Request) -> ModelT:
        return decode_body(
            await request.body(),
            model,
            empty_message=empty_message,
            include_decoder_error=include_decoder_error,
        )

    return dependency
