"""Application layer – validation, idempotency, routing, throttling and delivery."""
