from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sqlalchemy import Enum as SAEnum
from sqlmodel import Column, Field, SQLModel, String


class Role(str, Enum):
    """Represents the category of a platform account.

    Attributes:
        STUDENT: A guest looking for and booking hostel rooms.
        LANDLORD: A hostel owner managing listings and bookings.
        ADMIN: Confers administrative privileges for platform management.
    """

    STUDENT = "student"
    LANDLORD = "landlord"
    ADMIN = "admin"


class User(SQLModel, table=True):
    """Represents one platform account.

    Attributes:
        id: Internal identifier (UUID string), assigned at creation and never changed.
        first_name: Given name.
        last_name: Family name.
        email: Unique email address.
        phone: Contact phone number.
        hashed_password: Bcrypt digest of the password. Never the raw password,
            never logged.
        user_id: Unique external-facing identifier used to log in, distinct from `id`.
        role: Account category, see `Role`.
    """

    __tablename__ = "users"

    id: str = Field(
        sa_column=Column(String(36), primary_key=True),
        description="Immutable internal identifier.",
    )
    first_name: str = Field(sa_column=Column(String(100), nullable=False))
    last_name: str = Field(sa_column=Column(String(100), nullable=False))
    email: str = Field(
        sa_column=Column(String(255), unique=True, index=True, nullable=False),
        description="Unique email address.",
    )
    phone: Optional[str] = Field(default=None, sa_column=Column(String(32), nullable=True))
    hashed_password: str = Field(
        sa_column=Column(String(255), nullable=False),  # bcrypt output is 60 chars
    )
    user_id: str = Field(
        sa_column=Column(String(32), unique=True, index=True, nullable=False),
        description="Unique external identifier.",
    )
    role: Role = Field(
        sa_column=Column(
            SAEnum(Role, name="user_role", values_callable=lambda roles: [r.value for r in roles]),
            nullable=False,
            default=Role.STUDENT,
        ),
    )


@dataclass(frozen=True)
class CreatedUser:
    """Columns returned by the insert that creates a user.

    The external `user_id` is deliberately absent; callers that need it
    already hold it.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    phone: Optional[str]
    hashed_password: str
    role: Role
