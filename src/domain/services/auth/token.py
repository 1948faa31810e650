from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jwt import decode as jwt_decode, encode as jwt_encode, PyJWTError
from structlog import get_logger

from src.core.exceptions import AuthenticationError
from src.domain.entities.user import User

logger = get_logger(__name__)


class TokenService:
    """Issues and verifies signed JWT access tokens.

    Tokens are HMAC-signed with the application secret and carry the internal
    user id (`sub`) and the role.

    Attributes:
        secret_key (str): Signing key.
        algorithm (str): JWT signing algorithm.
        expire_minutes (int): Token lifetime.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 24 * 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_access_token(self, user: User) -> str:
        """Create a JWT access token for `user`."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "role": user.role.value,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        token = jwt_encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug("Access token created", id=user.id)
        return token

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry and return the claims.

        Raises:
            AuthenticationError: If the token is invalid or expired.
        """
        try:
            return jwt_decode(token, self.secret_key, algorithms=[self.algorithm])
        except PyJWTError as e:
            logger.warning("Access token rejected", error=str(e))
            raise AuthenticationError("Invalid or expired token", code="invalid_token") from e
