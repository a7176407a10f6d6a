"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the failure envelope.
"""

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from devcamper.domain.errors import (
    DevCamperError,
    DuplicateKeyError,
    FieldValidationError,
    GeocodingServiceError,
    InvalidIdentifierError,
    ResourceNotFoundError,
    StoreUnavailableError,
    UpstreamLookupError,
)
from devcamper.shared.responses import failure

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500
HTTP_502 = 502
HTTP_503 = 503

SERVER_ERROR = "Server Error"
REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content=failure(error))


def describe_request_errors(errors: Iterable[dict[str, Any]]) -> dict[str, str]:
    """Reduce FastAPI request validation errors to ``{field: reason}``."""
    fields: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        fields.setdefault(".".join(loc) or "request", error.get("msg", "invalid"))
    return fields


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ResourceNotFoundError)
    async def handle_not_found(
        _request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        """Handle identities that do not resolve to a record."""
        logger.warning("%s not found: %s", exc.resource, exc.resource_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(InvalidIdentifierError)
    async def handle_invalid_identifier(
        _request: Request, exc: InvalidIdentifierError
    ) -> JSONResponse:
        """Handle malformed identity tokens."""
        logger.warning("Malformed %s id: %s", exc.resource, exc.resource_id)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(FieldValidationError)
    async def handle_field_validation(
        _request: Request, exc: FieldValidationError
    ) -> JSONResponse:
        """Handle documents that violate their schema."""
        logger.warning("Validation failed on fields: %s", sorted(exc.fields))
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(DuplicateKeyError)
    async def handle_duplicate_key(
        _request: Request, exc: DuplicateKeyError
    ) -> JSONResponse:
        """Handle unique-index collisions."""
        logger.warning("Duplicate key on fields: %s", exc.fields)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(UpstreamLookupError)
    async def handle_upstream_lookup(
        _request: Request, exc: UpstreamLookupError
    ) -> JSONResponse:
        """Handle locations the geocoder could not resolve."""
        logger.warning("Geocoder returned no match for: %s", exc.query)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(GeocodingServiceError)
    async def handle_geocoding_service(
        _request: Request, exc: GeocodingServiceError
    ) -> JSONResponse:
        """Handle an unavailable or failing geocoding service."""
        logger.error("Geocoding service error: %s", exc.reason)
        return _error_response(HTTP_502, "Geocoding service unavailable")

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(
        _request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        """Handle an unreachable database."""
        logger.error("Document store unavailable: %s", exc.reason)
        return _error_response(HTTP_503, "Service unavailable")

    @app.exception_handler(DevCamperError)
    async def handle_domain(
        _request: Request, exc: DevCamperError
    ) -> JSONResponse:
        """Catch-all for unhandled domain errors."""
        logger.error("Unhandled domain error: %s", exc.message)
        return _error_response(HTTP_500, SERVER_ERROR)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed path, query or body parameters."""
        fields = describe_request_errors(exc.errors())
        logger.warning("Request validation failed on fields: %s", sorted(fields))
        return _error_response(HTTP_400, FieldValidationError(fields).message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
        response = _error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, SERVER_ERROR)
