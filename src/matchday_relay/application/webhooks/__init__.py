"""Application webhooks – reliable delivery of club payloads to one webhook."""
from matchday_relay.application.webhooks.batch import BatchDispatcher
from matchday_relay.application.webhooks.engine import DeliveryEngine
from matchday_relay.application.webhooks.enrichment import PayloadEnricher
from matchday_relay.application.webhooks.idempotency import IdempotencyStore
from matchday_relay.application.webhooks.results import BatchResult, DeliveryResult, SendResult
from matchday_relay.application.webhooks.router import CoverageReport, Priority, RouterResolver
from matchday_relay.application.webhooks.sender import WebhookSender
from matchday_relay.application.webhooks.signature import WebhookSigner
from matchday_relay.application.webhooks.store import InMemoryDurableStore, InMemoryFastCache
from matchday_relay.application.webhooks.transport import TransportResponse, WebhookTransport
from matchday_relay.application.webhooks.validator import PayloadValidator, ValidationResult

__all__ = [
    "BatchDispatcher",
    "BatchResult",
    "CoverageReport",
    "DeliveryEngine",
    "DeliveryResult",
    "IdempotencyStore",
    "InMemoryDurableStore",
    "InMemoryFastCache",
    "PayloadEnricher",
    "PayloadValidator",
    "Priority",
    "RouterResolver",
    "SendResult",
    "TransportResponse",
    "ValidationResult",
    "WebhookSender",
    "WebhookSigner",
    "WebhookTransport",
]
