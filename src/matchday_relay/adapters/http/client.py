"""HTTP adapter – HttpxWebhookTransport."""
from __future__ import annotations

from typing import Any, Mapping

import httpx

from matchday_relay.application.webhooks.transport import TransportResponse
from matchday_relay.kernel.errors import TransportConnectionError


class HttpxWebhookTransport:
    """Synchronous httpx client behind the :class:`WebhookTransport` port.

    Status codes are never raised; only transport-level failures (connect,
    read timeout, protocol errors) become :class:`TransportConnectionError`.
    """

    def __init__(self, client: httpx.Client | None = None, **kwargs: Any) -> None:
        self._client = client or httpx.Client(**kwargs)
        self._owns_client = client is None

    def __enter__(self) -> HttpxWebhookTransport:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def post(
        self,
        url: str,
        body: bytes,
        headers: Mapping[str, str],
        timeout: float,
    ) -> TransportResponse:
        try:
            response = self._client.post(url, content=body, headers=dict(headers), timeout=timeout)
        except httpx.TimeoutException as exc:
            raise TransportConnectionError(url, f"HTTP request timed out: POST {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportConnectionError(url, f"HTTP request failed: POST {url}: {exc}", cause=exc) from exc
        return TransportResponse(status_code=response.status_code, text=response.text)


__all__ = ["HttpxWebhookTransport"]
