"""Resilience – retry classification with linear / scaled backoff."""
from matchday_relay.resilience.retry.backoff import BackoffStrategy, LinearBackoff, ScaledBackoff
from matchday_relay.resilience.retry.policy import RATE_LIMITED, Classification, RetryPolicy

__all__ = [
    "BackoffStrategy",
    "Classification",
    "LinearBackoff",
    "RATE_LIMITED",
    "RetryPolicy",
    "ScaledBackoff",
]
