"""
FastAPI router for bootcamps.

All routes delegate to use cases. No business logic here.
Field validation is handled by the store's document schema.
Error mapping is handled by centralized error handlers.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Path, Query, Request, status

from devcamper.application.bootcamps.dtos import RadiusSearchQuery
from devcamper.application.bootcamps.search_within_radius import (
    SearchWithinRadiusUseCase,
)
from devcamper.application.resources.create_resource import CreateResourceUseCase
from devcamper.application.resources.delete_resource import DeleteResourceUseCase
from devcamper.application.resources.dtos import (
    CreateResourceCommand,
    DeleteResourceCommand,
    GetResourceQuery,
    ListResult,
    UpdateResourceCommand,
)
from devcamper.application.resources.get_resource import GetResourceUseCase
from devcamper.application.resources.list_query import parse_list_query
from devcamper.application.resources.list_resources import ListResourcesUseCase
from devcamper.application.resources.update_resource import UpdateResourceUseCase
from devcamper.core.config import settings
from devcamper.interfaces.bootcamps.dependencies import (
    get_create_bootcamp_use_case,
    get_delete_bootcamp_use_case,
    get_get_bootcamp_use_case,
    get_list_bootcamps_use_case,
    get_search_within_radius_use_case,
    get_update_bootcamp_use_case,
)
from devcamper.interfaces.schemas import (
    ERROR_RESPONSES,
    RecordListResponse,
    RecordResponse,
)
from devcamper.shared.responses import success
from devcamper.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/bootcamps", tags=["bootcamps"])

BOOTCAMP_EXAMPLE = {
    "name": "Devworks Bootcamp",
    "description": "Full stack web development bootcamp",
    "website": "https://devworks.com",
    "email": "enroll@devworks.com",
    "address": "233 Bay State Rd Boston MA 02215",
    "careers": ["Web Development", "UI/UX", "Business"],
    "housing": True,
    "jobAssistance": True,
}


def _pagination(result: ListResult) -> dict[str, Any]:
    pagination: dict[str, Any] = {}
    if result.next_page is not None:
        pagination["next"] = {"page": result.next_page.page, "limit": result.next_page.limit}
    if result.prev_page is not None:
        pagination["prev"] = {"page": result.prev_page.page, "limit": result.prev_page.limit}
    return pagination


@router.get(
    "",
    responses={200: {"model": RecordListResponse}, **ERROR_RESPONSES},
    summary="List bootcamps",
    description=(
        "List bootcamps with filtering (``field[gt|gte|lt|lte|in]=value``), "
        "``select``, ``sort``, ``page`` and ``limit``."
    ),
)
def list_bootcamps(
    request: Request,
    select: str | None = Query(None, description="Comma-separated fields to return"),
    sort: str | None = Query(None, description="Comma-separated sort fields, '-' for descending"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.page_size_default, ge=1, le=settings.page_size_max),
    use_case: ListResourcesUseCase = Depends(get_list_bootcamps_use_case),
) -> dict[str, Any]:
    """Get all bootcamps."""
    query = parse_list_query(
        request.query_params.multi_items(),
        default_limit=settings.page_size_default,
        max_limit=settings.page_size_max,
    )
    result = use_case.execute(query)
    return success(
        [record.to_dict() for record in result.records],
        count=result.count,
        pagination=_pagination(result),
    )


@router.get(
    "/radius/{zipcode}/{distance}",
    responses={200: {"model": RecordListResponse}, **ERROR_RESPONSES},
    summary="Find bootcamps within a radius",
    description="Find bootcamps within ``distance`` miles of a postal code.",
)
@limiter.limit(settings.rate_limit_heavy)
def get_bootcamps_in_radius(
    request: Request,
    zipcode: str = Path(..., min_length=1, max_length=20),
    distance: float = Path(..., ge=0, allow_inf_nan=False, description="Radius in miles"),
    use_case: SearchWithinRadiusUseCase = Depends(get_search_within_radius_use_case),
) -> dict[str, Any]:
    """Get bootcamps within a radius of a postal code."""
    records = use_case.execute(RadiusSearchQuery(zipcode=zipcode, distance=distance))
    return success([record.to_dict() for record in records], count=len(records))


@router.get(
    "/{bootcamp_id}",
    responses={200: {"model": RecordResponse}, **ERROR_RESPONSES},
    summary="Get a bootcamp",
)
def get_bootcamp(
    bootcamp_id: str,
    use_case: GetResourceUseCase = Depends(get_get_bootcamp_use_case),
) -> dict[str, Any]:
    """Get a single bootcamp."""
    record = use_case.execute(GetResourceQuery(record_id=bootcamp_id))
    return success(record.to_dict())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": RecordResponse}, **ERROR_RESPONSES},
    summary="Create a bootcamp",
)
def create_bootcamp(
    fields: dict[str, Any] = Body(..., examples=[BOOTCAMP_EXAMPLE]),
    use_case: CreateResourceUseCase = Depends(get_create_bootcamp_use_case),
) -> dict[str, Any]:
    """Create a new bootcamp."""
    record = use_case.execute(CreateResourceCommand(fields=fields))
    return success(record.to_dict())


@router.put(
    "/{bootcamp_id}",
    responses={200: {"model": RecordResponse}, **ERROR_RESPONSES},
    summary="Update a bootcamp",
)
def update_bootcamp(
    bootcamp_id: str,
    fields: dict[str, Any] = Body(...),
    use_case: UpdateResourceUseCase = Depends(get_update_bootcamp_use_case),
) -> dict[str, Any]:
    """Update a bootcamp."""
    record = use_case.execute(UpdateResourceCommand(record_id=bootcamp_id, fields=fields))
    return success(record.to_dict())


@router.delete(
    "/{bootcamp_id}",
    responses={200: {"model": RecordResponse}, **ERROR_RESPONSES},
    summary="Delete a bootcamp",
)
def delete_bootcamp(
    bootcamp_id: str,
    use_case: DeleteResourceUseCase = Depends(get_delete_bootcamp_use_case),
) -> dict[str, Any]:
    """Delete a bootcamp."""
    use_case.execute(DeleteResourceCommand(record_id=bootcamp_id))
    return success({})
