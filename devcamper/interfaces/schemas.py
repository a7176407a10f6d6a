"""
Pydantic schemas shared by all routers.

These describe the response envelope in the OpenAPI document. Routes
build envelope bodies with ``devcamper.shared.responses``.
No business logic belongs here.
"""

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Failure envelope returned by all error handlers."""

    success: bool = False
    error: str


class PageLinkSchema(BaseModel):
    """Pointer to a neighbouring page."""

    page: int
    limit: int


class PaginationSchema(BaseModel):
    """Links to the pages around the current one."""

    next: Optional[PageLinkSchema] = None
    prev: Optional[PageLinkSchema] = None


class RecordResponse(BaseModel):
    """Success envelope carrying one record."""

    success: bool = True
    data: dict[str, Any]


class RecordListResponse(BaseModel):
    """Success envelope carrying a list of records."""

    success: bool = True
    count: int
    pagination: Optional[PaginationSchema] = None
    data: list[dict[str, Any]]


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
