"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class LinearBackoff(BackoffStrategy):
    """Delay grows linearly: ``base_delay * attempt``."""

    def __init__(self, base_delay: float = 2.0, max_delay: float | None = None) -> None:
        self._base = base_delay
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        delay = self._base * attempt
        return delay if self._max is None else min(delay, self._max)


class ScaledBackoff(LinearBackoff):
    """Linear backoff with a constant multiplier: ``base_delay * attempt * factor``.

    Used for receiver throttling (HTTP 429), which backs off twice as hard as
    a server error.
    """

    def __init__(self, base_delay: float = 2.0, factor: float = 2.0, max_delay: float | None = None) -> None:
        super().__init__(base_delay, max_delay)
        self._factor = factor

    def compute(self, attempt: int) -> float:
        delay = self._base * attempt * self._factor
        return delay if self._max is None else min(delay, self._max)


__all__ = ["BackoffStrategy", "LinearBackoff", "ScaledBackoff"]
