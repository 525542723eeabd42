"""Application webhooks – result objects returned across the public API."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass
class DeliveryResult:
    """Outcome of one ``WebhookSender.send`` call (all of its attempts)."""

    success: bool
    attempts: int
    response_code: int | None = None
    error: str | None = None
    error_code: str | None = None


@dataclasses.dataclass
class SendResult:
    """Outcome of ``DeliveryEngine.send_one``.

    Unset optional fields are left out of :meth:`to_dict`, so a normal
    delivery has no ``skipped`` key at all.
    """

    success: bool
    event_type: str | None = None
    skipped: bool | None = None
    blocked: bool | None = None
    reason: str | None = None
    response_code: int | None = None
    attempts: int | None = None
    error: str | None = None
    error_code: str | None = None
    errors: list[str] | None = None
    idempotency_key: str | None = None

    @classmethod
    def from_delivery(
        cls,
        delivery: DeliveryResult,
        *,
        event_type: str | None,
        idempotency_key: str | None,
    ) -> SendResult:
        return cls(
            success=delivery.success,
            event_type=event_type,
            response_code=delivery.response_code,
            attempts=delivery.attempts,
            error=delivery.error,
            error_code=delivery.error_code,
            idempotency_key=idempotency_key,
        )

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in dataclasses.asdict(self).items() if v is not None}


@dataclasses.dataclass
class BatchResult:
    """Outcome of ``DeliveryEngine.send_batch``; no rollback on partial failure."""

    results: list[SendResult] = dataclasses.field(default_factory=list)

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def success(self) -> bool:
        return self.success_count == self.total_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "success_count": self.success_count,
            "total_count": self.total_count,
            "results": [r.to_dict() for r in self.results],
        }


__all__ = ["BatchResult", "DeliveryResult", "SendResult"]
