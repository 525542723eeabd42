"""Observability – delivery health: success-rate status plus limiter and router state."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from matchday_relay.observability.metrics import DeliveryMetrics

if TYPE_CHECKING:
    from matchday_relay.application.rate_limit import IntervalRateLimiter
    from matchday_relay.application.webhooks.router import CoverageReport, RouterResolver

__all__ = ["HealthReport", "HealthReporter", "HealthStatus"]

HEALTHY_THRESHOLD = 95.0
DEGRADED_THRESHOLD = 80.0


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @classmethod
    def from_success_rate(cls, rate: float) -> HealthStatus:
        if rate >= HEALTHY_THRESHOLD:
            return cls.HEALTHY
        if rate >= DEGRADED_THRESHOLD:
            return cls.DEGRADED
        return cls.UNHEALTHY


@dataclass
class HealthReport:
    status: HealthStatus
    metrics: dict[str, Any]
    rate_limiter: dict[str, Any]
    router_validation: CoverageReport
    configuration_issues: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "metrics": self.metrics,
            "rate_limiter": self.rate_limiter,
            "router_validation": self.router_validation.to_dict(),
            "configuration_issues": list(self.configuration_issues),
        }


class HealthReporter:
    """Rolls delivery counters, limiter state and router coverage into one report."""

    def __init__(
        self,
        metrics: DeliveryMetrics,
        rate_limiter: IntervalRateLimiter,
        router: RouterResolver,
    ) -> None:
        self._metrics = metrics
        self._rate_limiter = rate_limiter
        self._router = router

    def health(self, configuration_issues: list[str] | None = None) -> HealthReport:
        return HealthReport(
            status=HealthStatus.from_success_rate(self._metrics.success_rate),
            metrics=self._metrics.snapshot(),
            rate_limiter=self._rate_limiter.state(),
            router_validation=self._router.validate_coverage(),
            configuration_issues=configuration_issues or [],
        )
