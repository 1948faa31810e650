from __future__ import annotations

"""Centralized, structured exception hierarchy for the identity service.

Each exception carries a machine-readable `code` for programmatic handling and
a human-readable `message` for logging and client feedback. The hierarchy maps
cleanly to HTTP status codes in `src.core.handlers`.

Expected absence (a user that does not exist) is not an error here: lookups
return ``None`` and callers branch on it.
"""

from typing import Final, Optional

__all__: Final = [
    "HostelError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "PermissionDeniedError",
    "ValidationError",
    "PasswordPolicyError",
    "StorageError",
    "ConflictError",
    "DuplicateUserError",
    "RateLimitError",
    "RateLimitExceededError",
]


class HostelError(Exception):
    """Base exception class for all custom errors in the application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Auth-related errors
# ---------------------------------------------------------------------------


class AuthenticationError(HostelError):
    """Raised for general authentication failures. Maps to `401 Unauthorized`."""

    def __init__(self, message: str, code: str = "authentication_error"):
        super().__init__(message, code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when a login presents an unknown user id or a wrong password.

    Both cases share one generic message so callers cannot enumerate accounts.
    """

    def __init__(self, message: str = "Invalid credentials", code: str = "invalid_credentials"):
        super().__init__(message, code)


class PermissionDeniedError(HostelError):
    """Raised when an authenticated user lacks the role a resource requires.

    Maps to `403 Forbidden`.
    """

    def __init__(self, message: str = "Access denied", code: str = "permission_denied"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class ValidationError(HostelError):
    """Raised for general data validation failures."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


class PasswordPolicyError(ValidationError):
    """Raised when a password does not meet the required security policy."""

    def __init__(self, message: str, code: str = "password_policy_error"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Persistence errors
# ---------------------------------------------------------------------------


class StorageError(HostelError):
    """Raised for connection or query failures in the relational store.

    Wraps the underlying driver error. It is logged where it is raised, never
    retried inside the service, and maps to a `500 Internal Server Error`.
    """

    def __init__(self, message: str = "Storage operation failed", code: str = "storage_error"):
        super().__init__(message, code)


class ConflictError(HostelError):
    """Raised when a write violates a uniqueness constraint (`email`, `user_id`).

    Detected by the storage layer. Maps to `409 Conflict`.
    """

    def __init__(self, message: str = "Record already exists", code: str = "conflict"):
        super().__init__(message, code)


class DuplicateUserError(ConflictError):
    """Raised when registration hits an account that already exists."""

    def __init__(self, message: str = "Email already exist", code: str = "duplicate_user"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Operational errors
# ---------------------------------------------------------------------------


class RateLimitError(HostelError):
    """Base class for rate limiting related errors. Maps to `429 Too Many Requests`."""

    def __init__(self, message: str = "Too many requests", code: str = "rate_limit_exceeded"):
        super().__init__(message, code)


class RateLimitExceededError(RateLimitError):
    """Raised when a client exhausted its window on a guarded endpoint.

    Expected and recoverable: the client may retry once the window elapses.

    Attributes:
        retry_after (Optional[float]): Seconds until the window resets, when known.
    """

    def __init__(
        self,
        message: str = "Too many requests",
        code: str = "rate_limit_exceeded",
        retry_after: Optional[float] = None,
    ):
        super().__init__(message, code)
        self.retry_after = retry_after
