"""Application rate limiting."""
from matchday_relay.application.rate_limit.interval import IntervalRateLimiter

__all__ = ["IntervalRateLimiter"]
