"""Domain Value Objects for the identity domain.

Value objects describe domain concepts by their attributes rather than their
identity.
"""

from .rate_limit import RateLimitDecision, RateLimitWindow, WindowHit
from .reset_token import ResetToken, generate_reset_token

__all__ = [
    "RateLimitDecision",
    "RateLimitWindow",
    "WindowHit",
    "ResetToken",
    "generate_reset_token",
]
