# This file defines the API error taxonomy and the exception handlers that render it.
# It exists so every endpoint reports unauthorized, invalid, unknown-route, and unexpected failures the same way.
# Validation failures are raised where they are detected and abort the handler before any store access.
# Anything else that escapes a handler is caught here so one bad request never crashes the process.

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from activity_api.api.response_envelope import (
    BAD_REQUEST,
    INTERNAL_SERVER_ERROR,
    build_error_body,
    build_not_found_body,
)

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Domain error type with structured API details."""

    def __init__(self, *, status_code: int, error_code: str, message: str) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        super().__init__(message)


class Unauthorized(APIError):
    """Missing or incorrect admin credential on a protected route."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(status_code=401, error_code="UNAUTHORIZED", message=message)


class InvalidInput(APIError):
    """Malformed or missing request fields."""

    def __init__(self, message: str) -> None:
        super().__init__(status_code=400, error_code="INVALID_INPUT", message=message)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> Response:
        if isinstance(exc, Unauthorized):
            return PlainTextResponse(exc.message, status_code=exc.status_code)
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(error=BAD_REQUEST, message=exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request body on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content=build_error_body(error=BAD_REQUEST, message="Invalid payload"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and known paths with an unsupported method both read as "no such route".
        if exc.status_code in {404, 405}:
            return JSONResponse(status_code=404, content=build_not_found_body())
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(error=str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        # Rendered outside the CORS middleware, so the header is set here.
        return JSONResponse(
            status_code=500,
            content=build_error_body(error=INTERNAL_SERVER_ERROR, message=str(exc)),
            headers={"Access-Control-Allow-Origin": "*"},
        )
