"""Builds the limiters guarding the sensitive authentication endpoints.

Two independent instances are deployed:

- ``login``: login and registration attempts.
- ``password_reset``: forgot-password requests.
"""

from typing import Dict, Optional

from redis.asyncio import Redis
from structlog import get_logger

from src.core.config.settings import Settings
from src.core.rate_limiting.limiter import FixedWindowRateLimiter
from src.core.rate_limiting.stores import InMemoryWindowStore, RedisWindowStore, WindowStore

logger = get_logger(__name__)

LOGIN_LIMITER = "login"
PASSWORD_RESET_LIMITER = "password_reset"


def _build_store(settings: Settings, redis: Optional[Redis]) -> WindowStore:
    if settings.RATE_LIMIT_STORAGE == "redis" and redis is not None:
        return RedisWindowStore(redis)
    return InMemoryWindowStore()


def create_rate_limiters(
    settings: Settings, redis: Optional[Redis] = None
) -> Dict[str, FixedWindowRateLimiter]:
    """Create the endpoint limiters, each with its own window store.

    Args:
        settings: Application settings holding each limiter's configuration.
        redis: Shared client, required when `RATE_LIMIT_STORAGE` is 'redis'.

    Returns:
        Dict mapping limiter name to limiter.
    """
    if settings.RATE_LIMIT_STORAGE == "redis" and redis is None:
        logger.warning("rate_limit_redis_unavailable", fallback="memory")

    limiters = {
        LOGIN_LIMITER: FixedWindowRateLimiter(
            name=LOGIN_LIMITER,
            max_requests=settings.LOGIN_RATE_LIMIT_MAX,
            window_seconds=settings.LOGIN_RATE_LIMIT_WINDOW_SECONDS,
            message=settings.LOGIN_RATE_LIMIT_MESSAGE,
            store=_build_store(settings, redis),
            fail_open=settings.RATE_LIMIT_FAIL_OPEN,
        ),
        PASSWORD_RESET_LIMITER: FixedWindowRateLimiter(
            name=PASSWORD_RESET_LIMITER,
            max_requests=settings.PASSWORD_RESET_RATE_LIMIT_MAX,
            window_seconds=settings.PASSWORD_RESET_RATE_LIMIT_WINDOW_SECONDS,
            message=settings.PASSWORD_RESET_RATE_LIMIT_MESSAGE,
            store=_build_store(settings, redis),
            fail_open=settings.RATE_LIMIT_FAIL_OPEN,
        ),
    }
    logger.info(
        "rate_limiters_configured",
        limiters=list(limiters),
        storage=settings.RATE_LIMIT_STORAGE if redis is not None else "memory",
    )
    return limiters
