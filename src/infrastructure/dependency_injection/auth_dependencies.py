"""Dependencies for the authentication routes.

Long-lived collaborators (settings, connection pool, password context,
notifier) are created once per application and kept on ``app.state``; the
factories below assemble request-scoped services from them. Tests replace any
of them through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request
from passlib.context import CryptContext

from src.core.config.settings import Settings
from src.domain.interfaces.repositories import IUserRepository
from src.domain.interfaces.services import IPasswordResetNotifier
from src.domain.services.auth.token import TokenService
from src.domain.services.auth.user_authentication import UserAuthenticationService
from src.domain.services.auth.user_registration import UserRegistrationService
from src.domain.services.password_reset.password_reset_request_service import (
    PasswordResetRequestService,
)
from src.infrastructure.database.pool import ConnectionPool
from src.infrastructure.repositories.user_repository import UserRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_connection_pool(request: Request) -> ConnectionPool:
    return request.app.state.connection_pool


def get_password_context(request: Request) -> CryptContext:
    return request.app.state.pwd_context


def get_password_reset_notifier(request: Request) -> IPasswordResetNotifier:
    return request.app.state.password_reset_notifier


def get_user_repository(
    pool: Annotated[ConnectionPool, Depends(get_connection_pool)],
) -> IUserRepository:
    return UserRepository(pool)


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    return TokenService(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ACCESS_TOKEN_ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )


def get_user_registration_service(
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
    pwd_context: Annotated[CryptContext, Depends(get_password_context)],
) -> UserRegistrationService:
    return UserRegistrationService(user_repository, pwd_context)


def get_user_authentication_service(
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
    pwd_context: Annotated[CryptContext, Depends(get_password_context)],
) -> UserAuthenticationService:
    return UserAuthenticationService(user_repository, pwd_context)


def get_password_reset_request_service(
    user_repository: Annotated[IUserRepository, Depends(get_user_repository)],
    notifier: Annotated[IPasswordResetNotifier, Depends(get_password_reset_notifier)],
) -> PasswordResetRequestService:
    return PasswordResetRequestService(user_repository, notifier)
