from __future__ import annotations

"""Re-export response models for authentication endpoints."""

# flake8: noqa: F401 – re-export

from .auth import LoginResponse, MessageResponse, RegisterResponse
from .user import UserOut

__all__ = [
    "UserOut",
    "RegisterResponse",
    "LoginResponse",
    "MessageResponse",
]
