"""Forgot-password endpoint.

Always answers with the same acknowledgment, whether or not the email belongs
to an account. Guarded by the password-reset limiter, which is independent of
the login limiter.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from src.adapters.api.v1.auth.schemas import ForgotPasswordRequest, MessageResponse
from src.core.rate_limiting import PASSWORD_RESET_LIMITER, rate_limit
from src.domain.services.password_reset.password_reset_request_service import (
    PasswordResetRequestService,
)
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_password_reset_request_service,
)

logger = structlog.get_logger(__name__)
router = APIRouter()

RESET_ACKNOWLEDGMENT = "If the email is registered, a password reset link has been sent"


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Request a password reset link",
    dependencies=[Depends(rate_limit(PASSWORD_RESET_LIMITER))],
)
async def forgot_password(
    payload: ForgotPasswordRequest,
    reset_service: Annotated[
        PasswordResetRequestService, Depends(get_password_reset_request_service)
    ],
) -> MessageResponse:
    await reset_service.request_password_reset(payload.email)
    return MessageResponse(message=RESET_ACKNOWLEDGMENT)
