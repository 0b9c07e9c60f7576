"""
Exception handlers
==================

* ``BookingRejected`` and schema errors -> 400 with one entry per field.
* Unknown routes -> 404 listing the available endpoints.
* Anything unexpected (including an unparsable JSON body) -> generic 500;
  the exception text is only included in development.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from happyride.api.schemas import ErrorResponse, FieldErrorOut
from happyride.config import settings
from happyride.domain.entities import FieldError

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS = [
    "GET /api/health",
    "GET /api/test",
    "POST /api/estimate",
    "POST /api/book",
]

INTERNAL_ERROR_MESSAGE = "Internal server error. Please try again."


class BookingRejected(Exception):
    """Raised by the routes when the booking fails validation."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(", ".join(e.field for e in errors))
        self.errors = errors


def _json(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def _validation_failed(errors: list[FieldErrorOut]) -> JSONResponse:
    return _json(400, ErrorResponse(message="Validation failed", errors=errors))


def _internal_error(exc: Exception) -> JSONResponse:
    return _json(
        500,
        ErrorResponse(
            message=INTERNAL_ERROR_MESSAGE,
            error=str(exc) if settings.is_development else None,
        ),
    )


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


async def booking_rejected_handler(request: Request, exc: BookingRejected) -> JSONResponse:
    return _validation_failed(
        [FieldErrorOut(field=e.field, message=e.message) for e in exc.errors]
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        logger.error("Unparsable JSON body on %s %s", request.method, request.url.path)
        return _internal_error(ValueError("Malformed JSON body"))

    logger.info("Schema validation failed on %s: %d error(s)", request.url.path, len(errors))
    return _validation_failed(
        [
            FieldErrorOut(field=_field_name(tuple(err.get("loc", ()))), message=err.get("msg", "Invalid value"))
            for err in errors
        ]
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        logger.info("Route not found: %s %s", request.method, request.url.path)
        return _json(
            404,
            ErrorResponse(
                message=f"Route {request.url.path} not found",
                available_endpoints=AVAILABLE_ENDPOINTS,
            ),
        )
    return _json(exc.status_code, ErrorResponse(message=str(exc.detail)))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _internal_error(exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingRejected, booking_rejected_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
