"""Infrastructure errors – webhook transport failures."""

from __future__ import annotations

from typing import Any

from matchday_relay.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a payload rule violation."""

    default_code = "infrastructure_error"


class TransportConnectionError(InfrastructureError):
    """No HTTP response was received at all (DNS, connect, read timeout, …)."""

    default_code = "transport_connection_error"

    def __init__(self, url: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not reach '{url}'", **kwargs)
        self.url = url


class _StatusError(InfrastructureError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        return base


class RetryableTransportError(_StatusError):
    """429 or 5xx from the receiver; worth another attempt."""

    default_code = "retryable_transport_error"


class TerminalTransportError(_StatusError):
    """A 4xx other than 429: the request itself is wrong, do not retry."""

    default_code = "terminal_transport_error"


__all__ = [
    "InfrastructureError",
    "RetryableTransportError",
    "TerminalTransportError",
    "TransportConnectionError",
]
