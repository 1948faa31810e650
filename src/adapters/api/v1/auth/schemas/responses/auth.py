from __future__ import annotations

"""Composite response Pydantic models for authentication endpoints."""

from pydantic import BaseModel

from src.adapters.api.v1.auth.schemas.responses.user import UserOut


class RegisterResponse(BaseModel):
    """Response returned by ``POST /auth/register``."""

    message: str
    user: UserOut


class LoginResponse(BaseModel):
    """Response returned by ``POST /auth/login``."""

    access_token: str
    token_type: str = "bearer"
    user: UserOut


class MessageResponse(BaseModel):
    """Simple envelope used for acknowledgments."""

    message: str
