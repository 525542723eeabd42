"""Application-layer errors – configuration and policy outcomes."""

from __future__ import annotations

from matchday_relay.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ConfigurationError(ApplicationError):
    """Configuration needed for delivery is absent; retrying cannot help."""

    default_code = "configuration_error"


class ConsentDeniedError(ApplicationError):
    """The consent gate vetoed the send."""

    default_code = "consent_denied"


class InvalidOptionError(ApplicationError):
    """A caller-supplied send or batch option is unusable."""

    default_code = "invalid_option"


__all__ = ["ApplicationError", "ConfigurationError", "ConsentDeniedError", "InvalidOptionError"]
