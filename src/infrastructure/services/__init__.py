"""Infrastructure service implementations."""

from .password_reset_notifier import LoggingPasswordResetNotifier

__all__ = ["LoggingPasswordResetNotifier"]
