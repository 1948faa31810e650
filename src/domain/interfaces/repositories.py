"""Repository interfaces for abstracting data persistence in the domain layer.

The domain layer uses these interfaces to reach the relational store without
being coupled to SQLAlchemy. Concrete implementations live in
`src.infrastructure.repositories`.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.user import CreatedUser, Role, User


class IUserRepository(ABC):
    """An interface defining the contract for user persistence operations.

    Users are created once and read by email, external id or internal id. Absence is
    reported as ``None``, never as an exception.
    """

    @abstractmethod
    async def create_user(
        self,
        id: str,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str],
        hashed_password: str,
        user_id: str,
        role: Role,
    ) -> CreatedUser:
        """Inserts a new user.

        Returns:
            The created record, without `user_id`.

        Raises:
            ConflictError: If `email` or `user_id` is already taken.
            StorageError: For any other persistence failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Retrieves a user by email address, or `None` if no user matches."""
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_user_id(self, user_id: str) -> Optional[User]:
        """Retrieves a user by external identifier, or `None` if no user matches."""
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_id(self, id: str) -> Optional[User]:
        """Retrieves a user by internal identifier (the access token subject)."""
        raise NotImplementedError
