"""Application rate limiting – minimum spacing between outbound calls."""

from __future__ import annotations

from typing import Any

from matchday_relay.kernel.time import Clock, SystemClock


class IntervalRateLimiter:
    """Blocks until ``min_interval_ms`` has passed since the previous call.

    The "last call" timestamp is process-local; separate processes do not see
    each other's spacing.
    """

    def __init__(self, min_interval_ms: int = 1000, clock: Clock | None = None) -> None:
        self._min_interval = min_interval_ms / 1000
        self._clock = clock or SystemClock()
        self._last_call: float | None = None

    @property
    def min_interval_ms(self) -> int:
        return int(self._min_interval * 1000)

    def throttle(self) -> float:
        """Wait out the remaining interval, stamp ``now``; return seconds waited."""
        waited = 0.0
        if self._last_call is not None:
            elapsed = self._clock.monotonic() - self._last_call
            if elapsed < self._min_interval:
                waited = self._min_interval - elapsed
                self._clock.sleep(waited)
        self._last_call = self._clock.monotonic()
        return waited

    def pause(self) -> None:
        """Sleep one full interval unconditionally (used between batch chunks)."""
        self._clock.sleep(self._min_interval)
        self._last_call = self._clock.monotonic()

    def state(self) -> dict[str, Any]:
        return {
            "min_interval_ms": self.min_interval_ms,
            "last_call_monotonic": self._last_call,
        }


__all__ = ["IntervalRateLimiter"]
