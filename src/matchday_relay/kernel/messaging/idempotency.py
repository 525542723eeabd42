"""Kernel messaging – idempotency record and storage ports."""
from __future__ import annotations

import abc
import dataclasses
import json
from datetime import UTC, datetime


@dataclasses.dataclass(frozen=True)
class IdempotencyRecord:
    """Durable marker that a payload fingerprint was delivered."""

    key: str
    expires_at: datetime
    stored_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def to_json(self) -> str:
        return json.dumps(
            {
                "key": self.key,
                "expires_at": self.expires_at.isoformat(),
                "stored_at": self.stored_at.isoformat() if self.stored_at else None,
            },
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, raw: str | bytes) -> IdempotencyRecord:
        """Parse a stored record; raises ``ValueError``/``KeyError`` on bad data."""
        data = json.loads(raw)
        expires_at = datetime.fromisoformat(data["expires_at"])
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        stored_raw = data.get("stored_at")
        return cls(
            key=data["key"],
            expires_at=expires_at,
            stored_at=datetime.fromisoformat(stored_raw) if stored_raw else None,
        )


class FastCache(abc.ABC):
    """Port: short-lived, lossy cache shared on a best-effort basis."""

    @abc.abstractmethod
    def get(self, key: str) -> str | None: ...

    @abc.abstractmethod
    def put(self, key: str, value: str, ttl_seconds: int) -> None: ...

    @abc.abstractmethod
    def delete(self, key: str) -> None: ...


class DurableStore(abc.ABC):
    """Port: persistent key/value bag shared across execution contexts.

    There is no compare-and-swap; writes are last-writer-wins.
    """

    @abc.abstractmethod
    def get(self, key: str) -> str | None: ...

    @abc.abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abc.abstractmethod
    def delete(self, key: str) -> None: ...


__all__ = ["DurableStore", "FastCache", "IdempotencyRecord"]
