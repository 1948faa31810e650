"""Export identity domain entities for use across the application."""

from .user import CreatedUser, Role, User

__all__ = ["User", "Role", "CreatedUser"]
