"""Adapters – httpx transport and Redis-backed idempotency tiers."""
