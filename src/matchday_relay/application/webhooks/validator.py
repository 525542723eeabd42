"""Application webhooks – PayloadValidator."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Mapping

from matchday_relay.kernel.errors import (
    InvalidEventTypeError,
    InvalidTimestampError,
    MissingFieldError,
    PayloadTooLargeError,
    ValidationError,
)

__all__ = ["PayloadValidator", "ValidationResult", "REQUIRED_FIELDS"]

REQUIRED_FIELDS: tuple[str, ...] = ("event_type", "timestamp")
MAX_PAYLOAD_BYTES = 100_000

_ERROR_TYPES: dict[str, type[ValidationError]] = {
    "MissingField": MissingFieldError,
    "InvalidEventType": InvalidEventTypeError,
    "InvalidTimestamp": InvalidTimestampError,
    "PayloadTooLarge": PayloadTooLargeError,
}


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)
    size: int = 0

    def to_error(self) -> ValidationError:
        """Build the error for the first failure (only meaningful when invalid)."""
        kind = self.errors[0].split(":", 1)[0] if self.errors else ""
        error_cls = _ERROR_TYPES.get(kind, ValidationError)
        return error_cls("Payload validation failed: " + "; ".join(self.errors), errors=list(self.errors))


class PayloadValidator:
    """Checks required fields, event-type membership and serialised size.

    Pure: reads the payload and the configured enumeration, writes nothing.
    """

    def __init__(self, event_types: Iterable[str], max_bytes: int = MAX_PAYLOAD_BYTES) -> None:
        self._event_types = frozenset(event_types)
        self._max_bytes = max_bytes

    def validate(self, payload: Any) -> ValidationResult:
        if not isinstance(payload, Mapping):
            return ValidationResult(valid=False, errors=["MissingField: payload must be a mapping"])

        errors: list[str] = []
        for name in REQUIRED_FIELDS:
            if payload.get(name) in (None, ""):
                errors.append(f"MissingField: {name}")

        event_type = payload.get("event_type")
        if event_type not in (None, ""):
            if not isinstance(event_type, str):
                errors.append(f"InvalidEventType: expected a string, got {type(event_type).__name__}")
            elif event_type not in self._event_types:
                errors.append(f"InvalidEventType: {event_type}")

        timestamp = payload.get("timestamp")
        if timestamp not in (None, "") and not _is_iso_timestamp(timestamp):
            errors.append(f"InvalidTimestamp: {timestamp!r}")

        try:
            size = len(json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8"))
        except (TypeError, ValueError) as exc:
            errors.append(f"NotSerializable: {exc}")
            size = 0
        if size > self._max_bytes:
            errors.append(f"PayloadTooLarge: {size} bytes exceeds {self._max_bytes}")

        return ValidationResult(valid=not errors, errors=errors, size=size)


def _is_iso_timestamp(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True
