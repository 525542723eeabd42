"""Unit tests – IntervalRateLimiter."""
from __future__ import annotations

import pytest

from matchday_relay.application.rate_limit import IntervalRateLimiter
from matchday_relay.testing import FakeClock


class TestIntervalRateLimiter:
    def test_first_call_does_not_wait(self) -> None:
        clock = FakeClock()
        limiter = IntervalRateLimiter(1000, clock=clock)
        assert limiter.throttle() == 0.0
        assert clock.sleeps == []

    def test_back_to_back_calls_are_spaced(self) -> None:
        clock = FakeClock()
        limiter = IntervalRateLimiter(1000, clock=clock)
        limiter.throttle()
        assert limiter.throttle() == pytest.approx(1.0)
        assert clock.sleeps == [pytest.approx(1.0)]

    def test_only_remaining_interval_is_waited(self) -> None:
        clock = FakeClock()
        limiter = IntervalRateLimiter(1000, clock=clock)
        limiter.throttle()
        clock.advance(milliseconds=400)
        assert limiter.throttle() == pytest.approx(0.6)

    def test_no_wait_once_interval_elapsed(self) -> None:
        clock = FakeClock()
        limiter = IntervalRateLimiter(1000, clock=clock)
        limiter.throttle()
        clock.advance(seconds=2)
        assert limiter.throttle() == 0.0
        assert clock.sleeps == []

    def test_zero_interval_never_waits(self) -> None:
        clock = FakeClock()
        limiter = IntervalRateLimiter(0, clock=clock)
        for _ in range(3):
            limiter.throttle()
        assert clock.sleeps == []

    def test_pause_sleeps_full_interval(self) -> None:
        clock = FakeClock()
        limiter = IntervalRateLimiter(1000, clock=clock)
        limiter.pause()
        assert clock.sleeps == [1.0]
        # pause stamps the last call, so an immediate throttle waits again
        assert limiter.throttle() == pytest.approx(1.0)

    def test_state(self) -> None:
        clock = FakeClock()
        limiter = IntervalRateLimiter(1000, clock=clock)
        assert limiter.state() == {"min_interval_ms": 1000, "last_call_monotonic": None}
        limiter.throttle()
        assert limiter.state()["last_call_monotonic"] == clock.monotonic()
