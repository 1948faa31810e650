from __future__ import annotations

"""Window stores backing the fixed-window rate limiter.

A store counts one request against the window of a key and reports the new
count. Two backends are provided:

- ``InMemoryWindowStore``: a dict of `RateLimitWindow` guarded by a lock.
  State is per process and per store instance; it is lost on restart and is
  not shared between server processes.
- ``RedisWindowStore``: a key per window, created with a TTL equal to the
  window and incremented inside one MULTI/EXEC transaction, so every worker
  sees the same counters.
"""

import threading
import time
from typing import Callable, Dict, Optional, Protocol

from redis.asyncio import Redis
from structlog import get_logger

from src.domain.value_objects.rate_limit import RateLimitWindow, WindowHit

logger = get_logger(__name__)


class WindowStore(Protocol):
    async def hit(self, key: str, window_seconds: float) -> WindowHit: ...

    async def reset(self, key: str) -> None: ...


class InMemoryWindowStore:
    """Process-local window store.

    The read-modify-write of a window happens under a `threading.Lock` with no
    awaits inside, so it is atomic for event-loop tasks and worker threads
    alike: two requests arriving at `count == max - 1` can never both be
    counted as the last accepted one.

    Expired windows are swept from inside `increment` at most once per window
    duration, so the dict holds roughly one window duration's worth of
    clients.

    Args:
        clock: Monotonic clock in seconds; injectable for tests.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._windows: Dict[str, RateLimitWindow] = {}
        self._lock = threading.Lock()
        self._last_sweep: Optional[float] = None

    def increment(self, key: str, window_seconds: float) -> WindowHit:
        with self._lock:
            now = self._clock()
            if self._last_sweep is None:
                self._last_sweep = now
            elif now - self._last_sweep >= window_seconds:
                purged = self._drop_expired(now, window_seconds)
                self._last_sweep = now
                if purged:
                    logger.debug("rate_limit_windows_swept", purged=purged)

            window = self._windows.get(key)
            if window is None or window.is_expired(now, window_seconds):
                window = RateLimitWindow(window_start=now)
                self._windows[key] = window
            window.count += 1
            return WindowHit(count=window.count, resets_in=window.resets_in(now, window_seconds))

    async def hit(self, key: str, window_seconds: float) -> WindowHit:
        return self.increment(key, window_seconds)

    async def reset(self, key: str) -> None:
        with self._lock:
            self._windows.pop(key, None)

    def purge_expired(self, window_seconds: float) -> int:
        """Drop windows whose duration has elapsed.

        Returns:
            int: Number of windows removed
        """
        with self._lock:
            now = self._clock()
            self._last_sweep = now
            return self._drop_expired(now, window_seconds)

    def _drop_expired(self, now: float, window_seconds: float) -> int:
        # Caller holds the lock.
        expired = [k for k, w in self._windows.items() if w.is_expired(now, window_seconds)]
        for key in expired:
            del self._windows[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._windows)


class RedisWindowStore:
    """Redis-backed window store shared by every server process.

    The window key is created with `SET NX PX` (value 0, TTL = window) and then
    incremented in the same transaction, so the TTL is always in place before
    the first count and the window expires on its own.
    """

    def __init__(self, redis: Redis, prefix: str = "rate"):
        self._redis = redis
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    async def hit(self, key: str, window_seconds: float) -> WindowHit:
        redis_key = self._key(key)
        window_ms = max(1, int(window_seconds * 1000))
        async with self._redis.pipeline(transaction=True) as pipe:
            pipe.set(redis_key, 0, px=window_ms, nx=True)
            pipe.incr(redis_key)
            pipe.pttl(redis_key)
            _, count, ttl_ms = await pipe.execute()
        resets_in = ttl_ms / 1000 if ttl_ms and ttl_ms > 0 else float(window_seconds)
        return WindowHit(count=int(count), resets_in=resets_in)

    async def reset(self, key: str) -> None:
        await self._redis.delete(self._key(key))
