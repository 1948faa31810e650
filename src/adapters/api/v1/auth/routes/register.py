"""Registration endpoint.

Creates an account and returns it together with the generated ``user_id``
the owner logs in with. Shares the login limiter, so a client gets five
combined register/login attempts per window.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from src.adapters.api.v1.auth.schemas import RegisterRequest, RegisterResponse, UserOut
from src.core.rate_limiting import LOGIN_LIMITER, rate_limit
from src.domain.services.auth.user_registration import UserRegistrationService
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_user_registration_service,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["auth"],
    summary="Register a new user",
    dependencies=[Depends(rate_limit(LOGIN_LIMITER))],
)
async def register_user(
    payload: RegisterRequest,
    registration_service: Annotated[
        UserRegistrationService, Depends(get_user_registration_service)
    ],
) -> RegisterResponse:
    """Register a new account.

    Raises:
        PasswordPolicyError: Weak password (422).
        DuplicateUserError: Email already registered (409).
        RateLimitExceededError: Too many attempts from this client (429).
    """
    registration = await registration_service.register(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone=payload.phone,
        password=payload.password,
        role=payload.role,
    )
    return RegisterResponse(
        message="User registered successfully",
        user=UserOut.from_entity(registration.user, user_id=registration.user_id),
    )
