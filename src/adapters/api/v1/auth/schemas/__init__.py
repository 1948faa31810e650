from __future__ import annotations

"""Pydantic schemas for the authentication API."""

# flake8: noqa: F401 – re-export

from .requests import ForgotPasswordRequest, LoginRequest, RegisterRequest
from .responses import LoginResponse, MessageResponse, RegisterResponse, UserOut

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "ForgotPasswordRequest",
    "UserOut",
    "RegisterResponse",
    "LoginResponse",
    "MessageResponse",
]
