"""Fixed-window rate limiter.

Requests from one client identity are counted per discrete window. The first
request opens a window with a count of 1; each further request inside the
window increments the count and is accepted while the count stays at or below
`max_requests`. Once over the limit, requests keep being rejected (and
counted) until the window elapses, after which the next request opens a fresh
window.

Fixed windows allow up to `2 * max_requests` requests across a window
boundary. That is accepted here; the limiter must not be swapped for a sliding
window.
"""

from typing import Optional

from redis.exceptions import RedisError
from structlog import get_logger

from src.core.rate_limiting.stores import InMemoryWindowStore, WindowStore
from src.domain.value_objects.rate_limit import RateLimitDecision

logger = get_logger(__name__)


class FixedWindowRateLimiter:
    """Throttles repeated requests from the same client identity.

    Each instance owns its state: two limiters never share counters, even when
    configured identically or backed by the same Redis server (keys are
    namespaced by `name`).

    Args:
        name: Limiter name, used for logging and key namespacing.
        max_requests: Requests accepted per window.
        window_seconds: Window duration.
        message: Rejection message surfaced to the client.
        store: Window store; a fresh `InMemoryWindowStore` when omitted.
        fail_open: Accept requests when the store fails, instead of raising.
    """

    def __init__(
        self,
        name: str,
        max_requests: int,
        window_seconds: float,
        message: str,
        store: Optional[WindowStore] = None,
        fail_open: bool = True,
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be positive")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.name = name
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.message = message
        self._store = store if store is not None else InMemoryWindowStore()
        self._fail_open = fail_open

    @property
    def store(self) -> WindowStore:
        return self._store

    def _key(self, client: str) -> str:
        return f"{self.name}:{client}"

    async def check(self, client: str) -> RateLimitDecision:
        """Count a request from `client` and decide whether to accept it.

        Raises:
            RedisError: If the store fails and the limiter is not failing open.
        """
        try:
            hit = await self._store.hit(self._key(client), self.window_seconds)
        except (RedisError, OSError) as e:
            logger.error(
                "rate_limit_store_failed",
                limiter=self.name,
                error=str(e),
                fail_open=self._fail_open,
            )
            if not self._fail_open:
                raise
            return RateLimitDecision(
                allowed=True, count=0, limit=self.max_requests, retry_after=0.0
            )

        if hit.count <= self.max_requests:
            return RateLimitDecision(
                allowed=True,
                count=hit.count,
                limit=self.max_requests,
                retry_after=hit.resets_in,
            )

        logger.warning(
            "rate_limit_exceeded",
            limiter=self.name,
            client=client,
            count=hit.count,
            limit=self.max_requests,
        )
        return RateLimitDecision(
            allowed=False,
            count=hit.count,
            limit=self.max_requests,
            retry_after=hit.resets_in,
            message=self.message,
        )

    async def reset(self, client: str) -> None:
        """Forget the window of `client`."""
        await self._store.reset(self._key(client))

    def purge_expired(self) -> int:
        """Drop expired in-memory windows; Redis windows expire on their own."""
        if isinstance(self._store, InMemoryWindowStore):
            purged = self._store.purge_expired(self.window_seconds)
            if purged:
                logger.info("rate_limit_windows_purged", limiter=self.name, purged=purged)
            return purged
        return 0
