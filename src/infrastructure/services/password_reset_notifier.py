"""Infrastructure implementation of the password reset notifier.

Delivery (email) is owned by the notification subsystem. This notifier builds
the reset link and records that it was issued, with the token masked, so the
identity service can run on its own in development and test environments.
"""

import structlog

from src.domain.interfaces.services import IPasswordResetNotifier
from src.domain.value_objects.reset_token import ResetToken

logger = structlog.get_logger(__name__)


class LoggingPasswordResetNotifier(IPasswordResetNotifier):
    """Records reset links instead of delivering them.

    Args:
        reset_url: Base URL of the reset page; the token is appended as a path segment.
    """

    def __init__(self, reset_url: str):
        self._reset_url = reset_url.rstrip("/")

    async def send_reset_link(self, email: str, token: ResetToken) -> None:
        local, _, domain = email.partition("@")
        logger.info(
            "Password reset link issued",
            recipient=f"{local[:2]}***@{domain}",
            link=f"{self._reset_url}/{token.mask_for_logging()}",
        )
