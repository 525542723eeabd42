"""Application consent – optional veto over outbound payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, runtime_checkable

__all__ = ["AllowAllConsentGate", "CallableConsentGate", "ConsentDecision", "ConsentGate"]


@dataclass(frozen=True)
class ConsentDecision:
    allowed: bool
    reason: str | None = None


@runtime_checkable
class ConsentGate(Protocol):
    """Port: decide whether a payload may leave the system."""

    def evaluate(self, payload: Mapping[str, Any]) -> ConsentDecision: ...


class AllowAllConsentGate:
    """Default gate for deployments without a consent subsystem."""

    def evaluate(self, payload: Mapping[str, Any]) -> ConsentDecision:  # noqa: ARG002
        return ConsentDecision(allowed=True)


class CallableConsentGate:
    """Adapts a ``payload -> bool`` predicate (e.g. a GDPR lookup) to :class:`ConsentGate`."""

    def __init__(self, predicate: Callable[[Mapping[str, Any]], bool], reason: str = "consent_not_granted") -> None:
        self._predicate = predicate
        self._reason = reason

    def evaluate(self, payload: Mapping[str, Any]) -> ConsentDecision:
        if self._predicate(payload):
            return ConsentDecision(allowed=True)
        return ConsentDecision(allowed=False, reason=self._reason)
