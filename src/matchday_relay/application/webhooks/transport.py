"""Application webhooks – WebhookTransport port."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, runtime_checkable

__all__ = ["TransportResponse", "WebhookTransport"]


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class WebhookTransport(Protocol):
    """Port: POST a JSON body and hand back whatever status the receiver gave.

    Non-2xx statuses are returned, not raised. Implementations raise
    :class:`~matchday_relay.kernel.errors.TransportConnectionError` only
    when no response was received.
    """

    def post(
        self,
        url: str,
        body: bytes,
        headers: Mapping[str, str],
        timeout: float,
    ) -> TransportResponse: ...
