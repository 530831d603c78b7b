"""
Exception handlers that render every error as an APIError body.

Responses carry a short message and a machine-readable code only. Validation
internals, stack traces and credentials stay in the server log.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .models.common import APIError

logger = logging.getLogger(__name__)

ERROR_CODES = {
    400: "invalid_request",
    404: "not_found",
    405: "method_not_allowed",
    500: "internal_error",
    502: "bad_gateway",
    503: "service_unavailable",
}


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    body = APIError(error=message, error_code=ERROR_CODES.get(status_code, "error"))
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Structural decoding failures are client errors, reported as 400
    logger.info(f"Decode error on {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return error_response(400, "Invalid request body")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
