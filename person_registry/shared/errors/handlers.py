"""
Centralized error handlers for FastAPI.

Maps request-level errors to HTTP responses.
Repository outcomes never reach these handlers; they are reconciled
by the mediators. No stack traces or internal details are exposed.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from person_registry.shared.errors.envelope import (
    INTERNAL_ERROR_CODE,
    INVALID_JSON_CODE,
    ROOT_FIELD,
    VALIDATION_ERROR_CODE,
    error_envelope,
    format_validation_errors,
)
from person_registry.shared.errors.exceptions import InvalidJsonBodyError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def register_error_handlers(app: FastAPI) -> None:
    """Register all request error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle path/query parameters that fail validation."""
        errors = format_validation_errors(exc.errors(), strip_source=True)
        logger.info("Request validation failed for fields: %s", sorted(errors))
        return JSONResponse(
            status_code=HTTP_400,
            content=error_envelope(VALIDATION_ERROR_CODE, errors),
        )

    @app.exception_handler(InvalidJsonBodyError)
    async def handle_invalid_json(
        _request: Request, exc: InvalidJsonBodyError
    ) -> JSONResponse:
        """Handle bodies that are not JSON."""
        logger.info("Rejected non-JSON request body")
        return JSONResponse(
            status_code=HTTP_400,
            content=error_envelope(INVALID_JSON_CODE, {ROOT_FIELD: [exc.detail]}),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(
            status_code=HTTP_500,
            content=error_envelope(INTERNAL_ERROR_CODE),
        )
