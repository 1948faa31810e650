"""Domain Interfaces for dependency inversion.

These interfaces define contracts that infrastructure implements, keeping the
domain services free of storage and delivery details.
"""

from .repositories import IUserRepository
from .services import IPasswordResetNotifier

__all__ = ["IUserRepository", "IPasswordResetNotifier"]
