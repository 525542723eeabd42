"""Observability – process-lifetime delivery counters."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any


@dataclasses.dataclass
class DeliveryMetrics:
    """Mutable counters owned by one engine; never persisted."""

    total_calls: int = 0
    successful_calls: int = 0
    failed_calls: int = 0
    retried_calls: int = 0
    last_success_at: datetime | None = None

    def record_outcome(self, success: bool, at: datetime | None = None) -> None:
        self.total_calls += 1
        if success:
            self.successful_calls += 1
            self.last_success_at = at or self.last_success_at
        else:
            self.failed_calls += 1

    def record_retry(self) -> None:
        self.retried_calls += 1

    @property
    def success_rate(self) -> float:
        """Percentage of successful calls; 100.0 before any call is made."""
        if self.total_calls == 0:
            return 100.0
        return self.successful_calls / self.total_calls * 100

    def snapshot(self) -> dict[str, Any]:
        return {
            "total_calls": self.total_calls,
            "successful_calls": self.successful_calls,
            "failed_calls": self.failed_calls,
            "retried_calls": self.retried_calls,
            "last_success_at": self.last_success_at.isoformat() if self.last_success_at else None,
            "success_rate": round(self.success_rate, 2),
        }


__all__ = ["DeliveryMetrics"]
