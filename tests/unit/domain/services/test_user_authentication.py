from unittest.mock import AsyncMock

import pytest

from src.core.exceptions import InvalidCredentialsError
from src.domain.entities.user import Role, User
from src.domain.interfaces.repositories import IUserRepository
from src.domain.services.auth.user_authentication import UserAuthenticationService


@pytest.fixture
def stored_user(pwd_context):
    return User(
        id="7d1c1f7e-1111-4a4a-9c9c-000000000001",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone=None,
        hashed_password=pwd_context.hash("Str0ngP@ss"),
        user_id="AL12345678",
        role=Role.STUDENT,
    )


@pytest.fixture
def user_repository():
    return AsyncMock(spec=IUserRepository)


class TestUserAuthenticationService:
    @pytest.mark.asyncio
    async def test_valid_credentials_return_user(self, user_repository, pwd_context, stored_user):
        user_repository.get_user_by_user_id.return_value = stored_user
        service = UserAuthenticationService(user_repository, pwd_context)

        user = await service.authenticate("AL12345678", "Str0ngP@ss")

        assert user is stored_user
        user_repository.get_user_by_user_id.assert_awaited_once_with("AL12345678")

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, user_repository, pwd_context, stored_user):
        user_repository.get_user_by_user_id.return_value = stored_user
        service = UserAuthenticationService(user_repository, pwd_context)

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("AL12345678", "Wr0ngP@ss")

    @pytest.mark.asyncio
    async def test_unknown_user_gets_same_error(self, user_repository, pwd_context, mocker):
        user_repository.get_user_by_user_id.return_value = None
        dummy_verify = mocker.spy(pwd_context, "dummy_verify")
        service = UserAuthenticationService(user_repository, pwd_context)

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await service.authenticate("ZZ00000000", "Str0ngP@ss")

        assert str(exc_info.value) == "Invalid credentials"
        dummy_verify.assert_called_once()
