"""Application consent gate."""
from matchday_relay.application.consent.gate import (
    AllowAllConsentGate,
    CallableConsentGate,
    ConsentDecision,
    ConsentGate,
)

__all__ = ["AllowAllConsentGate", "CallableConsentGate", "ConsentDecision", "ConsentGate"]
