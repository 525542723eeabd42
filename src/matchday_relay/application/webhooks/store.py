"""Application webhooks – in-memory FastCache / DurableStore implementations."""
from __future__ import annotations

from datetime import timedelta

from matchday_relay.kernel.messaging import DurableStore, FastCache
from matchday_relay.kernel.time import Clock, SystemClock

__all__ = ["InMemoryDurableStore", "InMemoryFastCache"]


class InMemoryFastCache(FastCache):
    """Dict-backed cache that forgets entries once their TTL has elapsed."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._data: dict[str, tuple[str, float]] = {}

    def get(self, key: str) -> str | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock.timestamp() >= expires_at:
            del self._data[key]
            return None
        return value

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        expires_at = (self._clock.now() + timedelta(seconds=ttl_seconds)).timestamp()
        self._data[key] = (value, expires_at)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        """Drop everything, as the host cache may do at any time."""
        self._data.clear()

    def keys(self) -> list[str]:
        return list(self._data)


class InMemoryDurableStore(DurableStore):
    """Dict-backed durable store for tests and single-process runs."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
