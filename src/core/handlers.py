from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for custom application exceptions,
translating them into appropriate HTTP responses.
"""

import math

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from src.core.exceptions import (
    AuthenticationError,
    ConflictError,
    HostelError,
    PasswordPolicyError,
    PermissionDeniedError,
    RateLimitExceededError,
    StorageError,
)

__all__ = [
    "authentication_error_handler",
    "permission_denied_error_handler",
    "conflict_error_handler",
    "password_policy_error_handler",
    "rate_limit_exceeded_error_handler",
    "storage_error_handler",
    "hostel_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)

STORAGE_ERROR_DETAIL = "Internal server error"


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    Args:
        request: The incoming `Request` object.
        exc: The `AuthenticationError` instance.

    Returns:
        A `JSONResponse` with a 401 status code and error detail.
    """
    logger.warning(
        "Authentication failure",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def permission_denied_error_handler(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    """Handles `PermissionDeniedError`, returning a `403 Forbidden`."""
    logger.warning(
        "Permission denied",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": str(exc)},
    )


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    """Handles `ConflictError` (including `DuplicateUserError`), returning `409 Conflict`."""
    logger.info("Conflict", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc)},
    )


async def password_policy_error_handler(request: Request, exc: PasswordPolicyError) -> JSONResponse:
    """Handles `PasswordPolicyError`, returning `422 Unprocessable Entity`."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc)},
    )


async def rate_limit_exceeded_error_handler(
    request: Request, exc: RateLimitExceededError
) -> JSONResponse:
    """Handles `RateLimitExceededError`, returning `429 Too Many Requests`.

    The limiter's configured message is the response body; `Retry-After`
    carries the whole seconds left in the client's window.
    """
    logger.warning(
        "Rate limit exceeded",
        client_ip=_client_ip(request),
        path=request.url.path,
        retry_after=exc.retry_after,
    )
    headers = {}
    if exc.retry_after is not None:
        headers["Retry-After"] = str(max(1, math.ceil(exc.retry_after)))
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": str(exc)},
        headers=headers,
    )


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Handles `StorageError`, returning `500` without leaking driver details."""
    logger.error(
        "Storage failure",
        error=exc.code,
        reason=exc.message,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": STORAGE_ERROR_DETAIL},
    )


async def hostel_error_handler(request: Request, exc: HostelError) -> JSONResponse:
    """Fallback for application errors without a more specific handler."""
    logger.error("Unhandled application error", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Starlette resolves handlers along the exception's MRO, so the most
    specific registration wins.
    """
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(PermissionDeniedError, permission_denied_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(PasswordPolicyError, password_policy_error_handler)
    app.add_exception_handler(RateLimitExceededError, rate_limit_exceeded_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(HostelError, hostel_error_handler)
