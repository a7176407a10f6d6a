"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (bootcamps, auth, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- MongoDB client lifecycle

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pymongo.errors import PyMongoError
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from devcamper.core.config import settings
from devcamper.infrastructure.mongo.client import create_client
from devcamper.infrastructure.mongo.stores import bootcamp_store, user_store
from devcamper.interfaces.auth.router import router as auth_router
from devcamper.interfaces.bootcamps.router import router as bootcamps_router
from devcamper.interfaces.health import router as health_router
from devcamper.shared.errors.handlers import register_error_handlers
from devcamper.shared.logging import configure_logging
from devcamper.shared.security.headers import SecurityHeadersMiddleware
from devcamper.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the MongoDB client and ensure indexes."""
    client = create_client(settings)
    database = client[settings.mongo_db]
    app.state.mongo_client = client
    app.state.database = database

    try:
        for store in (bootcamp_store(database), user_store(database)):
            store.ensure_indexes()
    except PyMongoError:
        logger.warning(
            "MongoDB indexes could not be ensured. "
            "Requests will fail until the database is reachable.",
            exc_info=True,
        )

    yield

    client.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(bootcamps_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)

    return app


app = create_app()
