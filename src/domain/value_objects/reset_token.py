"""Reset Token Value Object for password reset credentials.

A reset token is 32 bytes (256 bits) drawn from the operating system's
cryptographically secure random source, encoded as 64 lowercase hex
characters. Generation has no side effects: associating the token with a
user, persisting it, expiring it and enforcing single use belong to the
caller.
"""

import re
import secrets
from dataclasses import dataclass
from typing import ClassVar, Pattern


@dataclass(frozen=True)
class ResetToken:
    """Password reset token value object.

    Attributes:
        value: The token string (64 lowercase hexadecimal characters).
    """

    value: str

    TOKEN_BYTES: ClassVar[int] = 32
    TOKEN_LENGTH: ClassVar[int] = 64
    FORMAT: ClassVar[Pattern[str]] = re.compile(r"[0-9a-f]{64}")

    def __post_init__(self) -> None:
        """Validate token format on construction."""
        if not isinstance(self.value, str) or not self.FORMAT.fullmatch(self.value):
            raise ValueError(
                f"Reset token must be {self.TOKEN_LENGTH} lowercase hexadecimal characters"
            )

    @classmethod
    def generate(cls) -> "ResetToken":
        """Generate a new reset token from `secrets`.

        Returns:
            ResetToken: New token holding 256 bits of entropy.
        """
        return cls(value=secrets.token_hex(cls.TOKEN_BYTES))

    def mask_for_logging(self) -> str:
        """Get masked token for safe logging.

        Returns:
            str: Token with only the first 8 characters visible
        """
        return f"{self.value[:8]}..."

    def __str__(self) -> str:
        return self.value


def generate_reset_token() -> str:
    """Return a fresh 64-character lowercase hex reset token."""
    return ResetToken.generate().value
