"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock so waiting and expiry are deterministic in tests."""

    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...
    def monotonic(self) -> float: ...
    def sleep(self, seconds: float) -> None: ...


class SystemClock:
    """Production clock: wall time from ``datetime.now(UTC)``, blocking sleeps."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return datetime.now(UTC).timestamp()

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


class FrozenClock:
    """Test clock pinned to a fixed point in time.

    ``sleep`` never blocks: it advances the pinned time and records the
    requested duration in :attr:`sleeps`.
    """

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed
        self.sleeps: list[float] = []

    def now(self) -> datetime:
        return self._fixed

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def monotonic(self) -> float:
        return self._fixed.timestamp()

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        if seconds > 0:
            self._fixed += timedelta(seconds=seconds)

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)

    @property
    def total_slept(self) -> float:
        return sum(self.sleeps)


def iso_now(clock: Clock) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return clock.now().astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["Clock", "FrozenClock", "SystemClock", "iso_now"]
