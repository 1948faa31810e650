"""Rate Limiting Core Module

Fixed-window abuse throttling for the sensitive authentication endpoints:

- Value Objects: `RateLimitWindow`, `WindowHit`, `RateLimitDecision`
- Limiter: `FixedWindowRateLimiter`
- Stores: in-process and Redis-backed window storage
- Registry: the deployed `login` and `password_reset` instances
"""

from .dependencies import rate_limit
from .limiter import FixedWindowRateLimiter
from .registry import LOGIN_LIMITER, PASSWORD_RESET_LIMITER, create_rate_limiters
from .stores import InMemoryWindowStore, RedisWindowStore, WindowStore

__all__ = [
    "FixedWindowRateLimiter",
    "InMemoryWindowStore",
    "RedisWindowStore",
    "WindowStore",
    "LOGIN_LIMITER",
    "PASSWORD_RESET_LIMITER",
    "create_rate_limiters",
    "rate_limit",
]
