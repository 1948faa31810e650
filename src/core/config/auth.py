"""
Authentication and credential settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class AuthSettings(BaseSettings):
    """
    Defines settings for password hashing, access tokens and reset links.

    Security Note:
        - BCRYPT_ROUNDS below 10 is only acceptable in test environments.
    """
    ACCESS_TOKEN_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(ge=1, default=24 * 60)
    BCRYPT_ROUNDS: int = Field(ge=4, le=31, default=10)
    PASSWORD_RESET_URL: str = "http://localhost:5173/reset-password"
