from passlib.context import CryptContext
from structlog import get_logger

from src.core.exceptions import InvalidCredentialsError
from src.domain.entities.user import User
from src.domain.interfaces.repositories import IUserRepository

logger = get_logger(__name__)


class UserAuthenticationService:
    """
    Service for handling login with the external user id and a password.

    Unknown ids and wrong passwords produce the same `InvalidCredentialsError`;
    for unknown ids a dummy hash is still verified so both paths take similar
    time. Brute-force throttling is applied at the API layer by the login
    limiter.

    Attributes:
        user_repository (IUserRepository): User lookups.
        pwd_context (CryptContext): Passlib context for bcrypt password hashing.
    """

    def __init__(self, user_repository: IUserRepository, pwd_context: CryptContext):
        self.user_repository = user_repository
        self.pwd_context = pwd_context

    async def authenticate(self, user_id: str, password: str) -> User:
        """
        Authenticate a user by external id and password.

        Returns:
            User: Authenticated user entity.

        Raises:
            InvalidCredentialsError: If the id is unknown or the password does not match.
            StorageError: If the lookup fails.
        """
        user = await self.user_repository.get_user_by_user_id(user_id)
        if user is None:
            self.pwd_context.dummy_verify()
            logger.info("Login failed", reason="unknown_user")
            raise InvalidCredentialsError()

        if not self.pwd_context.verify(password, user.hashed_password):
            logger.info("Login failed", reason="wrong_password", id=user.id)
            raise InvalidCredentialsError()

        logger.info("Login succeeded", id=user.id, role=user.role.value)
        return user
