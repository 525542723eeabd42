"""Resilience – retry classification and backoff."""
