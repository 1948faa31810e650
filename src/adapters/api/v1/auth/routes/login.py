"""Login endpoint.

Authenticates with the external ``user_id`` and a password and returns a
signed access token. Guarded by the login limiter.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from src.adapters.api.v1.auth.schemas import LoginRequest, LoginResponse, UserOut
from src.core.rate_limiting import LOGIN_LIMITER, rate_limit
from src.domain.services.auth.token import TokenService
from src.domain.services.auth.user_authentication import UserAuthenticationService
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_token_service,
    get_user_authentication_service,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Authenticate a user",
    dependencies=[Depends(rate_limit(LOGIN_LIMITER))],
)
async def login_user(
    payload: LoginRequest,
    auth_service: Annotated[
        UserAuthenticationService, Depends(get_user_authentication_service)
    ],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """Exchange credentials for an access token.

    Raises:
        InvalidCredentialsError: Unknown id or wrong password (401).
        RateLimitExceededError: Too many attempts from this client (429).
    """
    user = await auth_service.authenticate(payload.user_id, payload.password)
    return LoginResponse(
        access_token=token_service.create_access_token(user),
        user=UserOut.from_entity(user),
    )
