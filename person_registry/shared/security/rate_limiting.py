"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client rate limit on every route.
Routes opt in with ``@limiter.limit(default_rate_limit)`` and must
accept a ``request: Request`` parameter.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from person_registry.core.config import settings
from person_registry.shared.errors.envelope import error_envelope

RATE_LIMITED_CODE = "Rate limit exceeded"

limiter = Limiter(key_func=get_remote_address)


def default_rate_limit() -> str:
    """Return the configured limit, read on every request."""
    return settings.rate_limit_default


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the error envelope.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    return JSONResponse(
        status_code=429,
        content=error_envelope(RATE_LIMITED_CODE, {"limit": [str(exc.detail)]}),
    )
