"""Application webhooks – WebhookSender posts one payload with retry."""
from __future__ import annotations

import json
from typing import Any, Mapping

from matchday_relay.application.webhooks.results import DeliveryResult
from matchday_relay.application.webhooks.transport import WebhookTransport
from matchday_relay.kernel.errors import (
    BaseError,
    RetryableTransportError,
    TerminalTransportError,
    TransportConnectionError,
)
from matchday_relay.kernel.time import Clock, SystemClock
from matchday_relay.observability.logging import get_logger
from matchday_relay.observability.metrics import DeliveryMetrics
from matchday_relay.resilience.retry import Classification, RetryPolicy

__all__ = ["WebhookSender"]

logger = get_logger(__name__)

_BODY_PREVIEW = 500


class WebhookSender:
    """POSTs an enriched payload, retrying 429 / 5xx / network failures.

    Waits are blocking sleeps on the injected clock. The cumulative sleep for
    ``max_retries`` attempts is ``retry_delay * sum(1..max_retries-1)`` (doubled
    under 429), so callers with a hard execution budget should cap
    ``max_retries``.
    """

    def __init__(
        self,
        transport: WebhookTransport,
        *,
        user_agent: str,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delay: float = 2.0,
        clock: Clock | None = None,
        metrics: DeliveryMetrics | None = None,
    ) -> None:
        self._transport = transport
        self._user_agent = user_agent
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._clock = clock or SystemClock()
        self._metrics = metrics

    def send(
        self,
        url: str,
        payload: Mapping[str, Any],
        *,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        idempotency_key: str | None = None,
    ) -> DeliveryResult:
        policy = RetryPolicy(
            max_attempts=max_retries if max_retries is not None else self._max_retries,
            retry_delay=retry_delay if retry_delay is not None else self._retry_delay,
        )
        event_type = str(payload.get("event_type", ""))
        log = logger.bind(event_type=event_type, idempotency_key=idempotency_key)
        last_error: BaseError | None = None
        last_status: int | None = None

        for attempt in range(1, policy.max_attempts + 1):
            body = self._encode(payload, attempt)
            headers = self._headers(event_type, attempt, idempotency_key)
            try:
                response = self._transport.post(url, body, headers, self._timeout)
            except TransportConnectionError as exc:
                status: int | None = None
                last_status = None
                last_error = exc
            else:
                status = response.status_code
                last_status = status
                verdict = policy.classify(status)
                if verdict is Classification.SUCCESS:
                    if attempt > 1 and self._metrics is not None:
                        self._metrics.record_retry()
                    log.info("webhook.delivered", status=status, attempts=attempt)
                    return DeliveryResult(success=True, attempts=attempt, response_code=status)
                if verdict is Classification.TERMINAL:
                    err = TerminalTransportError(
                        f"HTTP {status}: {response.text[:_BODY_PREVIEW]}",
                        status_code=status,
                        body=response.text,
                    )
                    log.error("webhook.rejected", status=status, attempts=attempt)
                    return DeliveryResult(
                        success=False,
                        attempts=attempt,
                        response_code=status,
                        error=err.message,
                        error_code=err.code,
                    )
                last_error = RetryableTransportError(
                    f"HTTP {status}: {response.text[:_BODY_PREVIEW]}",
                    status_code=status,
                    body=response.text,
                )

            if policy.exhausted(attempt):
                break
            delay = policy.delay_for(status, attempt)
            log.warning(
                "webhook.retry_scheduled",
                attempt=attempt,
                status=status,
                delay_seconds=delay,
                error=last_error.message if last_error else None,
            )
            self._clock.sleep(delay)

        log.error("webhook.retries_exhausted", attempts=policy.max_attempts, status=last_status)
        return DeliveryResult(
            success=False,
            attempts=policy.max_attempts,
            response_code=last_status,
            error=last_error.message if last_error else "delivery failed",
            error_code=last_error.code if last_error else None,
        )

    def _headers(self, event_type: str, attempt: int, idempotency_key: str | None) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self._user_agent,
            "X-Attempt": str(attempt),
            "X-Event-Type": event_type,
        }
        if idempotency_key:
            headers["Idempotency-Key"] = idempotency_key
        return headers

    @staticmethod
    def _encode(payload: Mapping[str, Any], attempt: int) -> bytes:
        body = dict(payload)
        webhook = body.get("webhook")
        if isinstance(webhook, Mapping):
            body["webhook"] = {**webhook, "attempt": attempt}
        return json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
