"""
FastAPI router for authentication.

All routes delegate to use cases. No business logic here.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from devcamper.application.auth.dtos import RegisterUserCommand
from devcamper.application.auth.register_user import RegisterUserUseCase
from devcamper.core.config import settings
from devcamper.interfaces.auth.dependencies import get_register_user_use_case
from devcamper.interfaces.auth.schemas import RegisterRequest
from devcamper.interfaces.schemas import ERROR_RESPONSES, RecordResponse
from devcamper.shared.responses import success
from devcamper.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    responses={200: {"model": RecordResponse}, **ERROR_RESPONSES},
    summary="Register a user",
    description="Create a user account. The password is stored hashed and never returned.",
)
@limiter.limit(settings.rate_limit_heavy)
def register(
    request: Request,
    payload: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> dict[str, Any]:
    """Register a user."""
    user = use_case.execute(
        RegisterUserCommand(
            name=payload.name,
            email=payload.email,
            password=payload.password,
            role=payload.role,
        )
    )
    return success(user.to_dict())
