from __future__ import annotations

# FastAPI & typing
from typing import Annotated, Awaitable, Callable, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from structlog import get_logger

# Project imports
from src.core.exceptions import AuthenticationError, PermissionDeniedError
from src.domain.entities.user import Role, User
from src.domain.interfaces.repositories import IUserRepository
from src.domain.services.auth.token import TokenService
from src.infrastructure.dependency_injection.auth_dependencies import (
    get_token_service,
    get_user_repository,
)

__all__ = [
    "get_current_user",
    "require_roles",
    "CurrentUser",
]

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Type-annotated dependency shortcuts
# ---------------------------------------------------------------------------

# auto_error is off so a missing header goes through the application's 401 handler.
bearer_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)

TokenStr = Annotated[Optional[str], Depends(bearer_scheme)]


# ---------------------------------------------------------------------------
# Public dependencies
# ---------------------------------------------------------------------------


async def get_current_user(
    token: TokenStr,
    token_service: Annotated[TokenService, Depends(get_token_service)],
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
) -> User:
    """Return the :class:`~src.domain.entities.user.User` behind the bearer token.

    The function performs **no** role checks; it verifies the JWT and looks up
    the account named by its ``sub`` claim. Use :func:`require_roles` for
    role-enforced routes.

    Raises:
        AuthenticationError: Missing, invalid or expired token, or an account
            that no longer exists (401).
    """
    if not token:
        raise AuthenticationError("Unauthorized", code="missing_token")

    payload = token_service.decode_access_token(token)
    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Invalid token", code="invalid_token_subject")

    user = await user_repository.get_user_by_id(str(subject))
    if user is None:
        raise AuthenticationError("User not found", code="user_not_found")
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def require_roles(*roles: Role) -> Callable[..., Awaitable[User]]:
    """Return a dependency admitting only users whose role is in `roles`.

    Raises:
        PermissionDeniedError: Authenticated, but the role is not allowed (403).
    """
    allowed = frozenset(roles)

    async def _dependency(user: CurrentUser) -> User:
        if user.role not in allowed:
            logger.warning(
                "Role check failed",
                id=user.id,
                role=user.role.value,
                allowed=sorted(r.value for r in allowed),
            )
            raise PermissionDeniedError()
        return user

    return _dependency
