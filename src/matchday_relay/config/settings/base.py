"""Config settings – Settings base class and the relay snapshot."""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import ClassVar, Mapping

from matchday_relay.config.catalog import DEFAULT_EVENT_TYPES, DEFAULT_ROUTER_LANES
from matchday_relay.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for 12-factor settings. Instances are immutable snapshots."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _reject(self, name: str, reason: str) -> None:
        raise InvalidSettingValueError(name, getattr(self, name), reason, prefix=self._prefix)


@dataclasses.dataclass(frozen=True)
class RelaySettings(Settings):
    """Everything the delivery engine reads from configuration."""

    _prefix: ClassVar[str] = "MAKE"

    webhook_url: str = ""
    webhook_url_fallback: str = ""
    timeout_ms: int = 30000
    retry_attempts: int = 3
    retry_delay_ms: int = 2000
    idempotency_enabled: bool = True
    idempotency_ttl_seconds: int = 86400
    idempotency_prefix: str = "MAKE_IDEMPOTENCY_"
    cache_ttl_ceiling_seconds: int = 21600
    rate_limit_ms: int = 1000
    batch_size: int = 5
    max_payload_bytes: int = 100_000
    event_types: tuple[str, ...] = DEFAULT_EVENT_TYPES
    router_lanes: Mapping[str, str] = dataclasses.field(default_factory=lambda: DEFAULT_ROUTER_LANES)
    version: str = "6.2.0"
    environment: str = "production"
    club_name: str = "Syston Tigers"
    club_short_name: str = "Syston"
    season: str = "2024/25"
    user_agent: str = "matchday-relay/0.1"
    signing_secret: str = ""

    def _validate(self) -> None:
        # normalise containers so the snapshot cannot be mutated through them
        object.__setattr__(self, "event_types", tuple(self.event_types))
        object.__setattr__(self, "router_lanes", MappingProxyType(dict(self.router_lanes)))

        if self.retry_attempts < 1:
            self._reject("retry_attempts", "must be at least 1")
        for name in ("timeout_ms", "retry_delay_ms", "rate_limit_ms"):
            if getattr(self, name) < 0:
                self._reject(name, "must not be negative")
        if self.batch_size < 1:
            self._reject("batch_size", "must be at least 1")
        for name in ("idempotency_ttl_seconds", "cache_ttl_ceiling_seconds", "max_payload_bytes"):
            if getattr(self, name) <= 0:
                self._reject(name, "must be positive")

    @property
    def resolved_webhook_url(self) -> str:
        """Primary webhook URL, else the fallback, else ``""``."""
        return self.webhook_url or self.webhook_url_fallback

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


__all__ = ["RelaySettings", "Settings"]
