"""Password Reset Request Service.

Handles "forgot password": looks the account up by email and, when it exists,
mints a reset token and hands it to the notifier. The caller gets the same
outcome whether or not the email is known, so the endpoint cannot be used to
enumerate accounts. Abuse throttling happens before this service is reached,
in the password-reset limiter.

Token lifetime, persistence and single-use enforcement are owned by the
notification/reset subsystem that receives the token.
"""

from typing import Callable, Optional

import structlog

from src.domain.interfaces.repositories import IUserRepository
from src.domain.interfaces.services import IPasswordResetNotifier
from src.domain.value_objects.reset_token import ResetToken

logger = structlog.get_logger(__name__)


class PasswordResetRequestService:
    """Issues password reset tokens for known accounts.

    Args:
        user_repository: User lookups by email.
        notifier: Receives the token for delivery.
        token_factory: Token generator; `ResetToken.generate` by default.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        notifier: IPasswordResetNotifier,
        token_factory: Callable[[], ResetToken] = ResetToken.generate,
    ):
        self._user_repository = user_repository
        self._notifier = notifier
        self._token_factory = token_factory

    async def request_password_reset(self, email: str) -> Optional[ResetToken]:
        """Mint and dispatch a reset token when `email` belongs to an account.

        Returns:
            The issued token, or None when no account matches. Callers must not
            reveal which case occurred.

        Raises:
            StorageError: If the lookup fails.
        """
        email = email.strip().lower()
        user = await self._user_repository.get_user_by_email(email)
        if user is None:
            logger.info("Password reset requested for unknown email")
            return None

        token = self._token_factory()
        await self._notifier.send_reset_link(user.email, token)
        logger.info(
            "Password reset token issued",
            id=user.id,
            token=token.mask_for_logging(),
        )
        return token
