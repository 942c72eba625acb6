"""
Application entry point.

Creates the FastAPI application and wires together:
- The persons repository (one instance for the process lifetime)
- Routers (one per bounded context)
- Error handlers (centralized request-error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from person_registry.core.config import settings
from person_registry.domain.persons.ports import PersonsRepository
from person_registry.infrastructure.persons.in_memory_repository import (
    InMemoryPersonsRepository,
)
from person_registry.interfaces.health import router as health_router
from person_registry.interfaces.persons.router import router as persons_router
from person_registry.shared.errors.handlers import register_error_handlers
from person_registry.shared.logging import configure_logging
from person_registry.shared.security.headers import SecurityHeadersMiddleware
from person_registry.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def create_app(repository: Optional[PersonsRepository] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        repository: Store backing the persons routes. A fresh in-memory
            store is used when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    if repository is None:
        repository = InMemoryPersonsRepository(stripes=settings.repository_stripes)
    app.state.persons_repository = repository
    logger.info("Persons repository: %s", type(repository).__name__)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(persons_router, prefix=settings.api_prefix)

    return app


app = create_app()
