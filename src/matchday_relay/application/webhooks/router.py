"""Application webhooks – RouterResolver maps event types to lanes and priorities."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

from matchday_relay.config.catalog import HIGH_PRIORITY_EVENTS, MEDIUM_PRIORITY_EVENTS

__all__ = ["CoverageReport", "DEFAULT_LANE", "Priority", "RouterResolver"]

DEFAULT_LANE = "default"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class CoverageReport:
    valid: bool
    missing_routes: list[str] = field(default_factory=list)
    total_event_types: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "missing_routes": list(self.missing_routes),
            "total_event_types": self.total_event_types,
        }


class RouterResolver:
    """Read-only view over the router lane table."""

    def __init__(
        self,
        lanes: Mapping[str, str],
        event_types: Iterable[str],
        *,
        high: frozenset[str] = HIGH_PRIORITY_EVENTS,
        medium: frozenset[str] = MEDIUM_PRIORITY_EVENTS,
    ) -> None:
        self._lanes = dict(lanes)
        self._event_types = tuple(event_types)
        self._high = high
        self._medium = medium

    def route_for(self, event_type: str) -> str:
        return self._lanes.get(event_type) or DEFAULT_LANE

    def validate_coverage(self) -> CoverageReport:
        """Flag every configured event type that would fall through to the default lane."""
        missing = [et for et in self._event_types if self.route_for(et) == DEFAULT_LANE]
        return CoverageReport(
            valid=not missing,
            missing_routes=missing,
            total_event_types=len(self._event_types),
        )

    def priority_for(self, payload: Mapping[str, Any]) -> Priority:
        event_type = payload.get("event_type")
        if event_type in self._high:
            return Priority.HIGH
        if event_type in self._medium:
            return Priority.MEDIUM
        return Priority.LOW
