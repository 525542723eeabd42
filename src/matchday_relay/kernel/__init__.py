"""Kernel – errors, time and idempotency primitives shared by every layer."""
