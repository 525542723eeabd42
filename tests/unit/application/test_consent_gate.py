"""Unit tests – consent gates."""
from __future__ import annotations

from matchday_relay.application.consent import (
    AllowAllConsentGate,
    CallableConsentGate,
    ConsentDecision,
    ConsentGate,
)


class TestConsentGates:
    def test_allow_all(self) -> None:
        gate = AllowAllConsentGate()
        assert isinstance(gate, ConsentGate)
        assert gate.evaluate({"event_type": "goal_team"}) == ConsentDecision(allowed=True)

    def test_callable_gate_allows(self) -> None:
        gate = CallableConsentGate(lambda p: p.get("player") != "Minor")
        assert gate.evaluate({"player": "A"}).allowed is True

    def test_callable_gate_vetoes_with_reason(self) -> None:
        gate = CallableConsentGate(lambda p: p.get("player") != "Minor", reason="no_photo_consent")
        decision = gate.evaluate({"player": "Minor"})
        assert decision.allowed is False
        assert decision.reason == "no_photo_consent"
