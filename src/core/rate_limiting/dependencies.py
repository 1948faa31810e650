from __future__ import annotations

"""FastAPI dependency applying a named limiter to a route.

The client identity is the remote address of the connection. Limiters are
looked up on ``app.state.rate_limiters`` so every application instance (and
every test) owns fresh counters.
"""

from typing import Awaitable, Callable

from fastapi import Request

from src.core.exceptions import RateLimitExceededError


def client_identity(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def rate_limit(name: str) -> Callable[[Request], Awaitable[None]]:
    """Return a FastAPI *dependency* that enforces the limiter called `name`.

    Raises:
        RateLimitExceededError: With the limiter's message when the client is
            over its limit for the current window.
    """

    async def _dependency(request: Request) -> None:
        settings = request.app.state.settings
        if not settings.RATE_LIMIT_ENABLED:
            return  # short-circuit if feature toggled off

        limiter = request.app.state.rate_limiters[name]
        decision = await limiter.check(client_identity(request))
        if not decision.allowed:
            raise RateLimitExceededError(decision.message, retry_after=decision.retry_after)

    return _dependency
