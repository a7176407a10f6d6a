"""
Health check routes.

``/health`` is the liveness probe and never touches the database.
``/health/ready`` is the readiness probe and pings MongoDB.
"""

import logging

from fastapi import APIRouter, Depends
from pymongo.database import Database
from pymongo.errors import PyMongoError

from devcamper.core.config import settings
from devcamper.domain.errors import StoreUnavailableError
from devcamper.interfaces.dependencies import get_database
from devcamper.interfaces.schemas import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Liveness probe",
)
def health_check() -> HealthResponse:
    """Return application status and version."""
    return HealthResponse(status="ok", version=settings.version)


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Readiness probe",
    description="Returns 503 while MongoDB cannot be reached.",
)
def readiness_check(database: Database = Depends(get_database)) -> HealthResponse:
    """Ping the database before reporting ready."""
    try:
        database.command("ping")
    except PyMongoError as exc:
        raise StoreUnavailableError(type(exc).__name__) from exc
    return HealthResponse(status="ok", version=settings.version)
