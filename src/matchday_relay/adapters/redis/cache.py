"""Redis adapter – RedisFastCache and RedisDurableStore."""
from __future__ import annotations

from typing import Any

import redis

from matchday_relay.kernel.messaging import DurableStore, FastCache


def _decode(raw: Any) -> str | None:
    if raw is None:
        return None
    return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)


class RedisFastCache(FastCache):
    """Short-TTL tier: ``SET key value EX ttl``; Redis evicts on its own."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> RedisFastCache:
        return cls(redis.Redis.from_url(url, **kwargs))

    def get(self, key: str) -> str | None:
        return _decode(self._client.get(key))

    def put(self, key: str, value: str, ttl_seconds: int) -> None:
        self._client.set(key, value, ex=ttl_seconds)

    def delete(self, key: str) -> None:
        self._client.delete(key)


class RedisDurableStore(DurableStore):
    """Authoritative tier: plain ``SET`` with no Redis expiry.

    Expiry is carried inside the stored record and enforced lazily by the
    idempotency store.
    """

    def __init__(self, client: redis.Redis, namespace: str = "") -> None:
        self._client = client
        self._namespace = namespace

    @classmethod
    def from_url(cls, url: str, namespace: str = "", **kwargs: Any) -> RedisDurableStore:
        return cls(redis.Redis.from_url(url, **kwargs), namespace=namespace)

    def _key(self, key: str) -> str:
        return f"{self._namespace}{key}"

    def get(self, key: str) -> str | None:
        return _decode(self._client.get(self._key(key)))

    def set(self, key: str, value: str) -> None:
        self._client.set(self._key(key), value)

    def delete(self, key: str) -> None:
        self._client.delete(self._key(key))


__all__ = ["RedisDurableStore", "RedisFastCache"]
