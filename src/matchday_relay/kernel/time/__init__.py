"""Kernel time abstractions."""
from matchday_relay.kernel.time.clock import Clock, FrozenClock, SystemClock, iso_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "iso_now"]
