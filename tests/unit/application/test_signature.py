"""Unit tests – WebhookSigner and payload fingerprints."""
from __future__ import annotations

import pytest

from matchday_relay.application.webhooks import WebhookSigner
from matchday_relay.application.webhooks.fingerprint import canonical_json, fingerprint_digest


# ---------------------------------------------------------------------------
# Fingerprint
# ---------------------------------------------------------------------------


class TestFingerprint:
    def test_volatile_fields_ignored(self) -> None:
        a = {"event_type": "goal_team", "player": "A", "timestamp": "t1", "webhook": {"attempt": 1}}
        b = {"player": "A", "event_type": "goal_team", "timestamp": "t2", "club": {"name": "x"}}
        assert fingerprint_digest(a) == fingerprint_digest(b)

    def test_business_change_changes_digest(self) -> None:
        a = {"event_type": "goal_team", "minute": 10}
        b = {"event_type": "goal_team", "minute": 11}
        assert fingerprint_digest(a) != fingerprint_digest(b)

    def test_canonical_form(self) -> None:
        assert canonical_json({"b": 1, "a": "é", "timestamp": "t"}) == '{"a":"é","b":1}'.encode()

    def test_unserialisable_raises(self) -> None:
        with pytest.raises(TypeError):
            canonical_json({"event_type": "x", "blob": object()})


# ---------------------------------------------------------------------------
# WebhookSigner
# ---------------------------------------------------------------------------


class TestWebhookSigner:
    def test_unkeyed_token_is_opaque_trace(self) -> None:
        signer = WebhookSigner()
        first, second = signer.token(b"{}"), signer.token(b"{}")
        assert signer.keyed is False
        assert first.startswith("trace_")
        assert first != second

    def test_keyed_token_is_hmac(self) -> None:
        signer = WebhookSigner("s3cret")
        token = signer.token(b'{"a":1}')
        assert signer.keyed is True
        assert token.startswith("sha256=")
        assert token == signer.token(b'{"a":1}')
        assert WebhookSigner.verify(b'{"a":1}', "s3cret", token) is True

    def test_verify_rejects_tampering(self) -> None:
        token = WebhookSigner.sign(b'{"a":1}', "s3cret")
        assert WebhookSigner.verify(b'{"a":2}', "s3cret", token) is False
        assert WebhookSigner.verify(b'{"a":1}', "other", token) is False
