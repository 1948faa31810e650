from __future__ import annotations

"""Response Pydantic model for user data."""

from typing import Optional, Union

from pydantic import BaseModel

from src.domain.entities.user import CreatedUser, Role, User


class UserOut(BaseModel):
    """Public representation of an account. The password hash is never exposed."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    role: Role
    user_id: Optional[str] = None

    @classmethod
    def from_entity(cls, user: Union[User, CreatedUser], user_id: Optional[str] = None) -> "UserOut":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            role=user.role,
            user_id=user_id or getattr(user, "user_id", None),
        )
