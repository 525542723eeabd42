"""Resilience – status classification and backoff for webhook delivery."""
from __future__ import annotations

from enum import Enum

from matchday_relay.resilience.retry.backoff import BackoffStrategy, LinearBackoff, ScaledBackoff

RATE_LIMITED = 429


class Classification(str, Enum):
    SUCCESS = "SUCCESS"
    RETRYABLE = "RETRYABLE"
    TERMINAL = "TERMINAL"


class RetryPolicy:
    """Decides what a response means and how long to wait before trying again.

    * 2xx – success
    * 429 – retryable, ``retry_delay * attempt * 2``
    * 5xx – retryable, ``retry_delay * attempt``
    * no response (network failure) – retryable, ``retry_delay * attempt``
    * anything else – terminal
    """

    def __init__(
        self,
        max_attempts: int = 3,
        retry_delay: float = 2.0,
        *,
        server_backoff: BackoffStrategy | None = None,
        throttled_backoff: BackoffStrategy | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self.server_backoff = server_backoff or LinearBackoff(retry_delay)
        self.throttled_backoff = throttled_backoff or ScaledBackoff(retry_delay, factor=2.0)

    @staticmethod
    def classify(status_code: int | None) -> Classification:
        """Classify a status; ``None`` means no response was received."""
        if status_code is None:
            return Classification.RETRYABLE
        if 200 <= status_code < 300:
            return Classification.SUCCESS
        if status_code == RATE_LIMITED or status_code >= 500:
            return Classification.RETRYABLE
        return Classification.TERMINAL

    def delay_for(self, status_code: int | None, attempt: int) -> float:
        """Seconds to wait after a retryable failure on *attempt* (1-based)."""
        if status_code == RATE_LIMITED:
            return self.throttled_backoff.compute(attempt)
        return self.server_backoff.compute(attempt)

    def exhausted(self, attempt: int) -> bool:
        return attempt >= self.max_attempts


__all__ = ["Classification", "RATE_LIMITED", "RetryPolicy"]
