"""Rate Limiting Value Objects for domain modeling.

These value objects describe fixed-window counting: a window opens on the
first request from a client, counts every request until its duration has
elapsed, and is then replaced by a fresh one.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RateLimitWindow:
    """Mutable fixed-window counter for one client identity.

    Attributes:
        window_start: Clock reading (seconds) at which the window opened.
        count: Requests observed since `window_start`.
    """

    window_start: float
    count: int = 0

    def is_expired(self, now: float, duration: float) -> bool:
        """Check whether `duration` seconds have elapsed since the window opened."""
        return now - self.window_start >= duration

    def resets_in(self, now: float, duration: float) -> float:
        """Seconds left before the window expires (never negative)."""
        return max(0.0, self.window_start + duration - now)


@dataclass(frozen=True)
class WindowHit:
    """Outcome of counting one request against a window store.

    Attributes:
        count: Request count in the current window, including this request.
        resets_in: Seconds until the current window expires.
    """

    count: int
    resets_in: float


@dataclass(frozen=True)
class RateLimitDecision:
    """Result of checking a request against a limiter.

    Attributes:
        allowed: True when the request is accepted.
        count: Request count in the current window, including this request.
        limit: Maximum requests accepted per window.
        retry_after: Seconds until the window resets.
        message: The limiter's rejection message; None when accepted.
    """

    allowed: bool
    count: int
    limit: int
    retry_after: float
    message: Optional[str] = None

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self.count)
