"""Domain errors – payload rule violations."""

from __future__ import annotations

from typing import Any

from matchday_relay.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a payload rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Payload does not meet the structural or size rules.

    ``errors`` is the list of human-readable failures, each prefixed with the
    failure kind (``MissingField``, ``InvalidEventType``, ``InvalidTimestamp``,
    ``PayloadTooLarge``).
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[str] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class MissingFieldError(ValidationError):
    default_code = "missing_field"


class InvalidEventTypeError(ValidationError):
    default_code = "invalid_event_type"


class PayloadTooLargeError(ValidationError):
    default_code = "payload_too_large"


class InvalidTimestampError(ValidationError):
    default_code = "invalid_timestamp"


__all__ = [
    "DomainError",
    "InvalidEventTypeError",
    "InvalidTimestampError",
    "MissingFieldError",
    "PayloadTooLargeError",
    "ValidationError",
]
