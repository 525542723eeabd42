"""HTTP adapter."""
from matchday_relay.adapters.http.client import HttpxWebhookTransport

__all__ = ["HttpxWebhookTransport"]
