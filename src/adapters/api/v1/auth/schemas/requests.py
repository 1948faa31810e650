from __future__ import annotations

"""Request-payload Pydantic models for authentication endpoints."""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, constr

from src.domain.entities.user import Role

# ---------------------------------------------------------------------------
# Shared / primitive types ---------------------------------------------------
# ---------------------------------------------------------------------------

NameStr = constr(strip_whitespace=True, min_length=1, max_length=100)
UserIdStr = constr(strip_whitespace=True, min_length=1, max_length=32)

# ---------------------------------------------------------------------------
# Concrete request models ----------------------------------------------------
# ---------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    """Payload expected by ``POST /auth/register``."""

    first_name: NameStr = Field(..., examples=["Ada"])
    last_name: NameStr = Field(..., examples=["Lovelace"])
    email: EmailStr = Field(..., examples=["ada@example.com"])
    phone: Optional[str] = Field(default=None, max_length=32, examples=["+2348012345678"])
    password: str = Field(..., examples=["Str0ngP@ss"])
    role: Role = Field(default=Role.STUDENT, examples=["student"])


class LoginRequest(BaseModel):
    """Payload expected by ``POST /auth/login``."""

    user_id: UserIdStr = Field(..., examples=["AL12345678"])
    password: str = Field(..., examples=["Str0ngP@ss"])


class ForgotPasswordRequest(BaseModel):
    """Payload expected by ``POST /auth/forgot-password``."""

    email: EmailStr = Field(
        ...,
        examples=["ada@example.com"],
        description="Email address to send password reset instructions to",
    )
