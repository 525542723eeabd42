"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   └── ValidationError
    │       ├── MissingFieldError
    │       ├── InvalidEventTypeError
    │       ├── InvalidTimestampError
    │       └── PayloadTooLargeError
    ├── ApplicationError       (application.py)
    │   ├── ConfigurationError
    │   ├── ConsentDeniedError
    │   └── InvalidOptionError
    └── InfrastructureError    (infrastructure.py)
        ├── TransportConnectionError
        ├── RetryableTransportError
        └── TerminalTransportError
"""

from matchday_relay.kernel.errors.application import (
    ApplicationError,
    ConfigurationError,
    ConsentDeniedError,
    InvalidOptionError,
)
from matchday_relay.kernel.errors.base import BaseError
from matchday_relay.kernel.errors.domain import (
    DomainError,
    InvalidEventTypeError,
    InvalidTimestampError,
    MissingFieldError,
    PayloadTooLargeError,
    ValidationError,
)
from matchday_relay.kernel.errors.infrastructure import (
    InfrastructureError,
    RetryableTransportError,
    TerminalTransportError,
    TransportConnectionError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigurationError",
    "ConsentDeniedError",
    "DomainError",
    "InfrastructureError",
    "InvalidOptionError",
    "InvalidEventTypeError",
    "InvalidTimestampError",
    "MissingFieldError",
    "PayloadTooLargeError",
    "RetryableTransportError",
    "TerminalTransportError",
    "TransportConnectionError",
    "ValidationError",
]
