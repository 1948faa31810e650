"""User Repository implementation using SQLAlchemy Core over the connection pool.

Every operation acquires one pooled connection, runs exactly one
parameterized statement and releases the connection before returning,
whether the statement succeeded or not. Storage failures are translated into
the domain's `ConflictError` / `StorageError`; nothing is retried here.
"""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from structlog import get_logger

from src.core.exceptions import ConflictError, StorageError
from src.domain.entities.user import CreatedUser, Role, User
from src.domain.interfaces.repositories import IUserRepository
from src.infrastructure.database.pool import ConnectionPool

logger = get_logger(__name__)

users = User.__table__

_UNIQUE_VIOLATION_SQLSTATE = "23505"


def _mask_email(email: str) -> str:
    local, _, domain = email.partition("@")
    return f"{local[:2]}***@{domain}" if domain else f"{email[:2]}***"


def _is_unique_violation(error: IntegrityError) -> bool:
    """Tell uniqueness violations apart from other integrity failures (NOT NULL, FK)."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == _UNIQUE_VIOLATION_SQLSTATE
    message = str(orig).lower()
    return "unique" in message or "duplicate" in message


class UserRepository(IUserRepository):
    """SQLAlchemy implementation of `IUserRepository`.

    Args:
        pool: The shared connection pool. The repository holds no connection
            between calls.
    """

    def __init__(self, pool: ConnectionPool):
        self._pool = pool

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
        statement = (
            insert(users)
            .values(
                id=id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                hashed_password=hashed_password,
                user_id=user_id,
                role=role,
            )
            .returning(
                users.c.id,
                users.c.first_name,
                users.c.last_name,
                users.c.email,
                users.c.phone,
                users.c.hashed_password,
                users.c.role,
            )
        )

        try:
            async with self._pool.connection() as conn:
                result = await conn.execute(statement)
                row = result.one()
                await conn.commit()
        except IntegrityError as e:
            if _is_unique_violation(e):
                logger.warning(
                    "user_create_conflict",
                    email=_mask_email(email),
                    operation="create_user",
                )
                raise ConflictError("A user with this email or user id already exists") from e
            logger.error(
                "user_create_failed",
                error_type=type(e).__name__,
                error=str(e.orig),
                operation="create_user",
            )
            raise StorageError("Failed to create user") from e
        except SQLAlchemyError as e:
            logger.error(
                "user_create_failed",
                error_type=type(e).__name__,
                error=str(e),
                operation="create_user",
            )
            raise StorageError("Failed to create user") from e

        logger.info("user_created", id=row.id, role=Role(row.role).value)
        return CreatedUser(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            phone=row.phone,
            hashed_password=row.hashed_password,
            role=Role(row.role),
        )

    async def get_user_by_email(self, email: str) -> Optional[User]:
        user = await self._fetch_one(users.c.email == email, operation="get_user_by_email")
        logger.debug(
            "User lookup by email completed",
            email=_mask_email(email),
            found=user is not None,
        )
        return user

    async def get_user_by_user_id(self, user_id: str) -> Optional[User]:
        user = await self._fetch_one(users.c.user_id == user_id, operation="get_user_by_user_id")
        logger.debug(
            "User lookup by user id completed",
            user_id=user_id,
            found=user is not None,
        )
        return user

    async def get_user_by_id(self, id: str) -> Optional[User]:
        user = await self._fetch_one(users.c.id == id, operation="get_user_by_id")
        logger.debug("User lookup by id completed", id=id, found=user is not None)
        return user

    async def _fetch_one(self, criterion, operation: str) -> Optional[User]:
        # Uniqueness makes a second row impossible; if it ever exists only the first is used.
        statement = select(users).where(criterion).limit(1)
        try:
            async with self._pool.connection() as conn:
                result = await conn.execute(statement)
                row = result.first()
        except SQLAlchemyError as e:
            logger.error(
                "user_lookup_failed",
                error_type=type(e).__name__,
                error=str(e),
                operation=operation,
            )
            raise StorageError("Failed to read user") from e

        if row is None:
            return None
        values = dict(row._mapping)
        values["role"] = Role(values["role"])
        return User(**values)
