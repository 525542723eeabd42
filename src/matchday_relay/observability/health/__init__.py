"""Observability – delivery health reporting."""
from matchday_relay.observability.health.reporter import HealthReport, HealthReporter, HealthStatus

__all__ = ["HealthReport", "HealthReporter", "HealthStatus"]
