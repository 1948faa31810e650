"""Tests for PasswordResetRequestService."""

from unittest.mock import AsyncMock

import pytest
from structlog.testing import capture_logs

from src.domain.entities.user import Role, User
from src.domain.interfaces.repositories import IUserRepository
from src.domain.interfaces.services import IPasswordResetNotifier
from src.domain.services.password_reset.password_reset_request_service import (
    PasswordResetRequestService,
)
from src.domain.value_objects.reset_token import ResetToken
from src.infrastructure.services import LoggingPasswordResetNotifier


@pytest.fixture
def user():
    return User(
        id="7d1c1f7e-1111-4a4a-9c9c-000000000001",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone=None,
        hashed_password="x",
        user_id="AL12345678",
        role=Role.STUDENT,
    )


@pytest.fixture
def user_repository():
    return AsyncMock(spec=IUserRepository)


@pytest.fixture
def notifier():
    return AsyncMock(spec=IPasswordResetNotifier)


class TestPasswordResetRequestService:
    @pytest.mark.asyncio
    async def test_known_email_receives_token(self, user_repository, notifier, user):
        # Arrange
        user_repository.get_user_by_email.return_value = user
        service = PasswordResetRequestService(user_repository, notifier)

        # Act
        token = await service.request_password_reset(" ADA@example.com")

        # Assert
        user_repository.get_user_by_email.assert_awaited_once_with("ada@example.com")
        notifier.send_reset_link.assert_awaited_once_with("ada@example.com", token)
        assert isinstance(token, ResetToken)

    @pytest.mark.asyncio
    async def test_unknown_email_is_silently_ignored(self, user_repository, notifier):
        user_repository.get_user_by_email.return_value = None
        service = PasswordResetRequestService(user_repository, notifier)

        token = await service.request_password_reset("nobody@example.com")

        assert token is None
        notifier.send_reset_link.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_uses_injected_token_factory(self, user_repository, notifier, user):
        fixed = ResetToken("ab" * 32)
        user_repository.get_user_by_email.return_value = user
        service = PasswordResetRequestService(user_repository, notifier, token_factory=lambda: fixed)

        assert await service.request_password_reset("ada@example.com") is fixed


class TestLoggingPasswordResetNotifier:
    @pytest.mark.asyncio
    async def test_logs_masked_link_under_base_url(self):
        notifier = LoggingPasswordResetNotifier("https://hostel.example/reset/")
        token = ResetToken("cd" * 32)

        with capture_logs() as logs:
            await notifier.send_reset_link("ada@example.com", token)

        (event,) = [e for e in logs if e["event"] == "Password reset link issued"]
        assert event["link"] == "https://hostel.example/reset/cdcdcdcd..."
        assert event["recipient"] == "ad***@example.com"
        assert token.value not in str(logs)
