"""Observability – delivery metrics."""
from matchday_relay.observability.metrics.delivery import DeliveryMetrics

__all__ = ["DeliveryMetrics"]
