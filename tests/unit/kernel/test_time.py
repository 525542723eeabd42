"""Unit tests for kernel clocks."""

from __future__ import annotations

from datetime import UTC, datetime

from matchday_relay.kernel.time import FrozenClock, SystemClock, iso_now


class TestFrozenClock:
    def test_now_is_pinned(self) -> None:
        fixed = datetime(2025, 1, 1, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed

    def test_sleep_advances_and_records(self) -> None:
        clock = FrozenClock(datetime(2025, 1, 1, tzinfo=UTC))
        start = clock.monotonic()
        clock.sleep(1.5)
        clock.sleep(0.5)
        assert clock.sleeps == [1.5, 0.5]
        assert clock.total_slept == 2.0
        assert clock.monotonic() - start == 2.0

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2025, 1, 1, tzinfo=UTC))
        clock.advance(days=1)
        assert clock.now() == datetime(2025, 1, 2, tzinfo=UTC)
        assert clock.sleeps == []


class TestSystemClock:
    def test_now_is_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC

    def test_zero_sleep_returns(self) -> None:
        SystemClock().sleep(0)

    def test_monotonic_does_not_go_backwards(self) -> None:
        clock = SystemClock()
        a = clock.monotonic()
        assert clock.monotonic() >= a


class TestIsoNow:
    def test_z_suffix(self) -> None:
        clock = FrozenClock(datetime(2025, 1, 1, 12, 0, tzinfo=UTC))
        assert iso_now(clock) == "2025-01-01T12:00:00.000Z"
