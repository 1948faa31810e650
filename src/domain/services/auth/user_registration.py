import secrets
import uuid
from dataclasses import dataclass
from typing import Optional

from passlib.context import CryptContext
from structlog import get_logger

from src.core.exceptions import ConflictError, DuplicateUserError
from src.domain.entities.user import CreatedUser, Role
from src.domain.interfaces.repositories import IUserRepository
from src.domain.services.auth.password_policy import PasswordPolicyValidator

logger = get_logger(__name__)

ACCOUNT_CONFLICT_MESSAGE = "Account already exists"


@dataclass(frozen=True)
class Registration:
    """A created account together with the external id the owner logs in with."""

    user: CreatedUser
    user_id: str


def generate_user_id(first_name: str, last_name: str) -> str:
    """Build the external id: both initials, uppercased, followed by 8 random digits.

    >>> len(generate_user_id("ada", "lovelace"))
    10
    """
    digits = 10_000_000 + secrets.randbelow(90_000_000)
    return f"{first_name.strip()[0].upper()}{last_name.strip()[0].upper()}{digits}"


class UserRegistrationService:
    """Creates accounts.

    Validates the password policy, rejects known emails, hashes the password
    and assigns both identifiers before handing the row to the repository.
    A uniqueness conflict detected by the store (a concurrent registration or
    an external id collision) is reported as `DuplicateUserError`; it is not
    retried.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        pwd_context: CryptContext,
        password_policy: Optional[PasswordPolicyValidator] = None,
    ):
        self.user_repository = user_repository
        self.pwd_context = pwd_context
        self.password_policy = password_policy or PasswordPolicyValidator()

    async def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str],
        password: str,
        role: Role = Role.STUDENT,
    ) -> Registration:
        """Register a new account.

        Raises:
            PasswordPolicyError: If the password is too weak.
            DuplicateUserError: If the email (or generated user id) is taken.
            StorageError: For any other persistence failure.
        """
        self.password_policy.validate(password)
        email = email.strip().lower()

        if await self.user_repository.get_user_by_email(email) is not None:
            logger.info("Registration rejected", reason="email_taken")
            raise DuplicateUserError()

        user_id = generate_user_id(first_name, last_name)
        try:
            created = await self.user_repository.create_user(
                id=str(uuid.uuid4()),
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                email=email,
                phone=phone,
                hashed_password=self.pwd_context.hash(password),
                user_id=user_id,
                role=role,
            )
        except ConflictError as e:
            # Raced registration or a generated user_id collision, not necessarily the email.
            raise DuplicateUserError(ACCOUNT_CONFLICT_MESSAGE) from e

        logger.info("User registered", id=created.id, role=created.role.value)
        return Registration(user=created, user_id=user_id)
