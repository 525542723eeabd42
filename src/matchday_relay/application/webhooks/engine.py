"""Application webhooks – DeliveryEngine, the single entry point for producers.

Pipeline per payload::

    validate -> consent gate -> idempotency check -> enrich
             -> rate limiter -> sender (retry) -> mark processed -> metrics

Every failure comes back as a :class:`SendResult`; nothing is raised to the
caller.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from matchday_relay.application.consent import AllowAllConsentGate, ConsentGate
from matchday_relay.application.rate_limit import IntervalRateLimiter
from matchday_relay.application.webhooks.batch import BatchDispatcher
from matchday_relay.application.webhooks.enrichment import PayloadEnricher
from matchday_relay.application.webhooks.idempotency import IdempotencyStore
from matchday_relay.application.webhooks.results import BatchResult, SendResult
from matchday_relay.application.webhooks.router import RouterResolver
from matchday_relay.application.webhooks.sender import WebhookSender
from matchday_relay.application.webhooks.store import InMemoryDurableStore, InMemoryFastCache
from matchday_relay.application.webhooks.transport import WebhookTransport
from matchday_relay.application.webhooks.validator import PayloadValidator
from matchday_relay.config.catalog import SYSTEM_TEST
from matchday_relay.config.settings import RelaySettings, SettingsValidator
from matchday_relay.kernel.errors import ConfigurationError, ConsentDeniedError, InvalidOptionError
from matchday_relay.kernel.messaging import DurableStore, FastCache
from matchday_relay.kernel.time import Clock, SystemClock, iso_now
from matchday_relay.observability.health import HealthReport, HealthReporter
from matchday_relay.observability.logging import get_logger
from matchday_relay.observability.metrics import DeliveryMetrics

__all__ = ["DeliveryEngine"]

logger = get_logger(__name__)

DUPLICATE_REASON = "duplicate_payload"

SEND_OPTIONS: frozenset[str] = frozenset(
    {"max_retries", "retry_delay_ms", "idempotency_key", "skip_idempotency", "skip_rate_limit"}
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _send_option_problem(max_retries: Any, retry_delay_ms: Any) -> str | None:
    if max_retries is not None and not (_is_int(max_retries) and max_retries >= 1):
        return f"max_retries must be an integer of at least 1, got {max_retries!r}"
    if retry_delay_ms is not None and not (_is_int(retry_delay_ms) and retry_delay_ms >= 0):
        return f"retry_delay_ms must be a non-negative integer, got {retry_delay_ms!r}"
    return None


class DeliveryEngine:
    """Holds configuration and collaborators; build once, share by reference."""

    def __init__(
        self,
        settings: RelaySettings,
        transport: WebhookTransport,
        *,
        cache: FastCache | None = None,
        durable: DurableStore | None = None,
        clock: Clock | None = None,
        consent_gate: ConsentGate | None = None,
        session_id: str | None = None,
    ) -> None:
        self.settings = settings
        self._clock = clock or SystemClock()
        self._consent = consent_gate or AllowAllConsentGate()
        self._metrics = DeliveryMetrics()

        self.validator = PayloadValidator(settings.event_types, settings.max_payload_bytes)
        self.router = RouterResolver(settings.router_lanes, settings.event_types)
        self.rate_limiter = IntervalRateLimiter(settings.rate_limit_ms, clock=self._clock)
        self.idempotency = IdempotencyStore(
            cache if cache is not None else InMemoryFastCache(self._clock),
            durable if durable is not None else InMemoryDurableStore(),
            enabled=settings.idempotency_enabled,
            ttl_seconds=settings.idempotency_ttl_seconds,
            cache_ttl_ceiling=settings.cache_ttl_ceiling_seconds,
            prefix=settings.idempotency_prefix,
            clock=self._clock,
        )
        self.enricher = PayloadEnricher(settings, self.router, clock=self._clock, session_id=session_id)
        self.sender = WebhookSender(
            transport,
            user_agent=settings.user_agent,
            timeout=settings.timeout_seconds,
            max_retries=settings.retry_attempts,
            retry_delay=settings.retry_delay_ms / 1000,
            clock=self._clock,
            metrics=self._metrics,
        )
        self._batches = BatchDispatcher(self.send_one, self.rate_limiter, settings.batch_size)
        self._health = HealthReporter(self._metrics, self.rate_limiter, self.router)

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    def send_one(
        self,
        payload: Mapping[str, Any],
        *,
        max_retries: int | None = None,
        retry_delay_ms: int | None = None,
        idempotency_key: str | None = None,
        skip_idempotency: bool = False,
        skip_rate_limit: bool = False,
    ) -> SendResult:
        event_type = payload.get("event_type") if isinstance(payload, Mapping) else None
        problem = _send_option_problem(max_retries, retry_delay_ms)
        if problem is not None:
            return self._rejected(event_type, problem)
        try:
            return self._send_one(
                payload,
                event_type=event_type,
                max_retries=max_retries,
                retry_delay_ms=retry_delay_ms,
                idempotency_key=idempotency_key,
                skip_idempotency=skip_idempotency,
                skip_rate_limit=skip_rate_limit,
            )
        except Exception as exc:  # noqa: BLE001
            logger.exception("webhook.unexpected_error", event_type=event_type)
            self._metrics.record_outcome(False)
            return SendResult(success=False, event_type=event_type, error=str(exc), error_code="unexpected_error")

    def _send_one(
        self,
        payload: Mapping[str, Any],
        *,
        event_type: str | None,
        max_retries: int | None,
        retry_delay_ms: int | None,
        idempotency_key: str | None,
        skip_idempotency: bool,
        skip_rate_limit: bool,
    ) -> SendResult:
        validation = self.validator.validate(payload)
        if not validation.valid:
            err = validation.to_error()
            logger.warning("webhook.invalid_payload", event_type=event_type, errors=validation.errors)
            self._metrics.record_outcome(False)
            return SendResult(
                success=False,
                event_type=event_type,
                error=err.message,
                error_code=err.code,
                errors=list(validation.errors),
            )

        url = self.settings.resolved_webhook_url
        if not url:
            err = ConfigurationError("Webhook URL not configured")
            logger.error("webhook.not_configured", event_type=event_type)
            self._metrics.record_outcome(False)
            return SendResult(success=False, event_type=event_type, error=err.message, error_code=err.code)

        decision = self._consent.evaluate(payload)
        if not decision.allowed:
            err = ConsentDeniedError(f"Send blocked by consent gate: {decision.reason or 'denied'}")
            logger.info("webhook.consent_blocked", event_type=event_type, reason=decision.reason)
            return SendResult(
                success=False,
                event_type=event_type,
                blocked=True,
                reason=decision.reason,
                error=err.message,
                error_code=err.code,
            )

        key = self.idempotency.resolve_key(payload, explicit_key=idempotency_key, skip=skip_idempotency)
        if key is not None and self.idempotency.is_duplicate(key):
            logger.info("webhook.duplicate_skipped", event_type=event_type, idempotency_key=key)
            return SendResult(
                success=True,
                event_type=event_type,
                skipped=True,
                reason=DUPLICATE_REASON,
                idempotency_key=key,
            )

        enriched = self.enricher.enrich(payload)
        if not skip_rate_limit:
            self.rate_limiter.throttle()

        delivery = self.sender.send(
            url,
            enriched,
            max_retries=max_retries,
            retry_delay=retry_delay_ms / 1000 if retry_delay_ms is not None else None,
            idempotency_key=key,
        )
        if delivery.success and key is not None:
            self.idempotency.mark_processed(key)
        self._metrics.record_outcome(delivery.success, at=self._clock.now())
        return SendResult.from_delivery(delivery, event_type=event_type, idempotency_key=key)

    def send_batch(
        self,
        payloads: Sequence[Mapping[str, Any]],
        *,
        batch_size: int | None = None,
        **options: Any,
    ) -> BatchResult:
        problem = self._batch_option_problem(batch_size, options)
        if problem is not None:
            return BatchResult(
                results=[
                    self._rejected(p.get("event_type") if isinstance(p, Mapping) else None, problem)
                    for p in payloads
                ]
            )
        return self._batches.send_batch(payloads, batch_size=batch_size, **options)

    @staticmethod
    def _batch_option_problem(batch_size: Any, options: Mapping[str, Any]) -> str | None:
        unknown = sorted(set(options) - SEND_OPTIONS)
        if unknown:
            return f"Unknown send option(s): {', '.join(unknown)}"
        if batch_size is not None and not (_is_int(batch_size) and batch_size >= 1):
            return f"batch_size must be an integer of at least 1, got {batch_size!r}"
        return _send_option_problem(options.get("max_retries"), options.get("retry_delay_ms"))

    @staticmethod
    def _rejected(event_type: Any, problem: str) -> SendResult:
        err = InvalidOptionError(problem)
        logger.error("webhook.invalid_option", event_type=event_type, error=problem)
        return SendResult(success=False, event_type=event_type, error=err.message, error_code=err.code)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def test_connectivity(self) -> SendResult:
        """Push a synthetic ``system_test`` event through the whole pipeline."""
        payload = {
            "event_type": SYSTEM_TEST,
            "timestamp": iso_now(self._clock),
            "source": "matchday_relay",
            "message": "Webhook connectivity test",
        }
        return self.send_one(payload, skip_idempotency=True)

    def metrics(self) -> dict[str, Any]:
        return self._metrics.snapshot()

    def validate_configuration(self) -> list[str]:
        issues = SettingsValidator().validate(self.settings)
        coverage = self.router.validate_coverage()
        issues.extend(f"No router lane for event type '{et}'" for et in coverage.missing_routes)
        return issues

    def health(self) -> HealthReport:
        return self._health.health(configuration_issues=self.validate_configuration())
