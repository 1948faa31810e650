"""
Rate limiting settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class RateLimitSettings(BaseSettings):
    """
    Defines the two endpoint limiters and the storage backing their windows.

    Performance Note:
        - 'memory' keeps windows inside the process; it is only correct with a
          single server process. Use 'redis' behind multiple workers.
    """
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_STORAGE: str = Field(default="memory", pattern="^(memory|redis)$")
    RATE_LIMIT_FAIL_OPEN: bool = True
    REDIS_URL: str = "redis://localhost:6379/0"

    LOGIN_RATE_LIMIT_MAX: int = Field(ge=1, default=5)
    LOGIN_RATE_LIMIT_WINDOW_SECONDS: int = Field(ge=1, default=15 * 60)
    LOGIN_RATE_LIMIT_MESSAGE: str = "Too many request, please try again later."

    PASSWORD_RESET_RATE_LIMIT_MAX: int = Field(ge=1, default=5)
    PASSWORD_RESET_RATE_LIMIT_WINDOW_SECONDS: int = Field(ge=1, default=15 * 60)
    PASSWORD_RESET_RATE_LIMIT_MESSAGE: str = "Too many requests. Try again later."
