import re

from src.core.exceptions import PasswordPolicyError

PASSWORD_MIN_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*"


class PasswordPolicyValidator:
    """Validates passwords against the platform's security policy.

    A password needs at least 8 characters, an uppercase letter, a digit and
    one of ``!@#$%^&*``.
    """

    def __init__(self, min_length: int = PASSWORD_MIN_LENGTH):
        self.min_length = min_length
        self._special = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

    def validate(self, password: str) -> None:
        """Validates the given password against the policy.

        Raises:
            PasswordPolicyError: If the password does not meet the policy requirements.
        """
        if len(password) < self.min_length:
            raise PasswordPolicyError(
                f"Password must be at least {self.min_length} characters long"
            )

        if not re.search(r"[A-Z]", password):
            raise PasswordPolicyError("Must include an uppercase letter")

        if not re.search(r"\d", password):
            raise PasswordPolicyError("Must include a number")

        if not self._special.search(password):
            raise PasswordPolicyError("Must include a special character")
