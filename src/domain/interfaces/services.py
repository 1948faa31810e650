"""Service interfaces consumed by the identity domain."""

from abc import ABC, abstractmethod

from src.domain.value_objects.reset_token import ResetToken


class IPasswordResetNotifier(ABC):
    """Delivers a password reset token to the account owner.

    Delivery itself (email, SMS) is owned by the notification subsystem.
    """

    @abstractmethod
    async def send_reset_link(self, email: str, token: ResetToken) -> None:
        """Hands a freshly minted token over for delivery to `email`."""
        raise NotImplementedError
