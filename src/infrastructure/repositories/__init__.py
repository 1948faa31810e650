"""Repository implementations for the infrastructure layer."""

from .user_repository import UserRepository
from src.domain.interfaces.repositories import IUserRepository

__all__ = ["UserRepository", "IUserRepository"] 