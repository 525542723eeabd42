"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

from matchday_relay.kernel.errors import (
    ApplicationError,
    BaseError,
    ConfigurationError,
    DomainError,
    InfrastructureError,
    InvalidEventTypeError,
    MissingFieldError,
    RetryableTransportError,
    TerminalTransportError,
    TransportConnectionError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("boom").code == "base_error"

    def test_explicit_code_wins(self) -> None:
        assert BaseError("boom", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        data = json.loads(str(BaseError("boom", detail={"k": 1})))
        assert data == {"code": "base_error", "message": "boom", "detail": {"k": 1}}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrapped", cause=cause)
        assert err.__cause__ is cause
        assert "cause" in err.to_dict()

    def test_repr(self) -> None:
        assert repr(ConfigurationError("x")) == "ConfigurationError(code='configuration_error', message='x')"


class TestHierarchy:
    def test_validation_errors_are_domain_errors(self) -> None:
        assert issubclass(MissingFieldError, ValidationError)
        assert issubclass(InvalidEventTypeError, ValidationError)
        assert issubclass(ValidationError, DomainError)

    def test_configuration_is_application_error(self) -> None:
        assert issubclass(ConfigurationError, ApplicationError)

    def test_transport_errors_are_infrastructure(self) -> None:
        for cls in (TransportConnectionError, RetryableTransportError, TerminalTransportError):
            assert issubclass(cls, InfrastructureError)


class TestValidationError:
    def test_errors_in_dict(self) -> None:
        err = MissingFieldError("bad", errors=["MissingField: timestamp"])
        assert err.to_dict()["errors"] == ["MissingField: timestamp"]
        assert err.code == "missing_field"


class TestTransportErrors:
    def test_connection_error_default_message(self) -> None:
        err = TransportConnectionError("https://hook")
        assert "https://hook" in err.message
        assert err.url == "https://hook"

    def test_status_errors_carry_status(self) -> None:
        err = TerminalTransportError("HTTP 404", status_code=404, body="nope")
        assert err.status_code == 404
        assert err.body == "nope"
        assert err.to_dict()["status_code"] == 404
