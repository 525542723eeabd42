"""Observability – structured logging helpers."""
from matchday_relay.observability.logging.factory import JsonLoggerFactory
from matchday_relay.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
