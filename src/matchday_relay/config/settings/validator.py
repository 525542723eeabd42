"""Config settings – SettingsValidator."""
from __future__ import annotations

from matchday_relay.config.settings.base import RelaySettings


class SettingsValidator:
    """Report operator-facing issues in a populated relay configuration."""

    def validate(self, settings: RelaySettings) -> list[str]:
        """Return a list of human-readable issues (empty when all is well)."""
        issues: list[str] = []
        if not settings.resolved_webhook_url:
            issues.append("Webhook URL not configured")
        known = set(settings.event_types)
        for event_type in settings.router_lanes:
            if event_type not in known:
                issues.append(f"Router lane configured for unknown event type '{event_type}'")
        if not settings.idempotency_prefix:
            issues.append("Idempotency key prefix is empty")
        return issues


__all__ = ["SettingsValidator"]
