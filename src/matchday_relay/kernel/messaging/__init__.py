"""Kernel messaging – idempotency ports."""
from matchday_relay.kernel.messaging.idempotency import DurableStore, FastCache, IdempotencyRecord

__all__ = ["DurableStore", "FastCache", "IdempotencyRecord"]
