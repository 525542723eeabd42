"""Application webhooks – two-tier idempotency store.

Records live in a lossy fast cache (TTL capped at ``cache_ttl_ceiling``) and in
an authoritative durable store (full TTL, expired lazily on read).

Known limitation: there is no atomic check-and-set across the two tiers and
the durable store offers no compare-and-swap. Two sends of the same
fingerprint racing each other can both see ``is_duplicate() == False`` and
both deliver. Duplicates are suppressed in the common case, not guaranteed.
"""
from __future__ import annotations

import uuid
from datetime import timedelta
from typing import Any, Mapping

from matchday_relay.application.webhooks.fingerprint import fingerprint_digest
from matchday_relay.kernel.messaging import DurableStore, FastCache, IdempotencyRecord
from matchday_relay.kernel.time import Clock, SystemClock
from matchday_relay.observability.logging import get_logger

__all__ = ["IdempotencyStore"]

logger = get_logger(__name__)

_CACHE_MARKER = "1"


class IdempotencyStore:
    """Owns every read and write of idempotency records."""

    def __init__(
        self,
        cache: FastCache,
        durable: DurableStore,
        *,
        enabled: bool = True,
        ttl_seconds: int = 86400,
        cache_ttl_ceiling: int = 21600,
        prefix: str = "MAKE_IDEMPOTENCY_",
        clock: Clock | None = None,
    ) -> None:
        self._cache = cache
        self._durable = durable
        self._enabled = enabled
        self._ttl = ttl_seconds
        self._cache_ttl = min(ttl_seconds, cache_ttl_ceiling)
        self._prefix = prefix
        self._clock = clock or SystemClock()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def resolve_key(
        self,
        payload: Mapping[str, Any],
        *,
        explicit_key: str | None = None,
        skip: bool = False,
    ) -> str | None:
        """Return the key for *payload*, or ``None`` when dedup does not apply."""
        if not self._enabled or skip:
            return None
        if explicit_key:
            return explicit_key if explicit_key.startswith(self._prefix) else self._prefix + explicit_key

        event_type = payload.get("event_type", "unknown")
        try:
            digest = fingerprint_digest(payload)
        except (TypeError, ValueError) as exc:
            digest = uuid.uuid4().hex
            logger.warning("idempotency.hash_failed", event_type=event_type, error=str(exc))
        return f"{self._prefix}{event_type}_{digest}"

    def is_duplicate(self, key: str) -> bool:
        try:
            if self._cache.get(key) is not None:
                return True
        except Exception as exc:  # noqa: BLE001
            logger.warning("idempotency.cache_read_failed", key=key, error=str(exc))

        try:
            raw = self._durable.get(key)
        except Exception as exc:  # noqa: BLE001
            logger.warning("idempotency.store_read_failed", key=key, error=str(exc))
            return False
        if raw is None:
            return False

        try:
            record = IdempotencyRecord.from_json(raw)
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("idempotency.record_unreadable", key=key, error=str(exc))
            return False

        if record.is_expired(self._clock.now()):
            self._forget(key)
            return False
        return True

    def mark_processed(self, key: str) -> IdempotencyRecord:
        now = self._clock.now()
        record = IdempotencyRecord(key=key, expires_at=now + timedelta(seconds=self._ttl), stored_at=now)
        try:
            self._cache.put(key, _CACHE_MARKER, self._cache_ttl)
        except Exception as exc:  # noqa: BLE001
            logger.warning("idempotency.cache_write_failed", key=key, error=str(exc))
        try:
            self._durable.set(key, record.to_json())
        except Exception as exc:  # noqa: BLE001
            logger.warning("idempotency.store_write_failed", key=key, error=str(exc))
        return record

    def _forget(self, key: str) -> None:
        try:
            self._durable.delete(key)
        except Exception as exc:  # noqa: BLE001
            logger.warning("idempotency.store_delete_failed", key=key, error=str(exc))
        logger.debug("idempotency.record_expired", key=key)
