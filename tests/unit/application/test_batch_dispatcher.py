"""Unit tests – batch sending."""
from __future__ import annotations

import pytest

from matchday_relay.application.webhooks import DeliveryEngine
from matchday_relay.application.webhooks.batch import chunked
from matchday_relay.config import RelaySettings
from matchday_relay.testing import FakeClock, RecordedRequest, ScriptedTransport

URL = "https://hook.make.test/abc"


def _items(n: int):
    return [
        {"event_type": "fixtures_1_league", "timestamp": "2025-01-01T12:00:00Z", "item": i}
        for i in range(1, n + 1)
    ]


def _fail_item(number: int):
    def decide(request: RecordedRequest) -> int:
        return 400 if request.json()["item"] == number else 200

    return decide


class TestChunked:
    def test_even_and_remainder(self) -> None:
        assert chunked([1, 2, 3, 4, 5, 6, 7], 5) == [[1, 2, 3, 4, 5], [6, 7]]

    def test_empty(self) -> None:
        assert chunked([], 5) == []

    def test_rejects_zero(self) -> None:
        with pytest.raises(ValueError):
            chunked([1], 0)


class TestSendBatch:
    def _engine(self, transport, **overrides):
        settings = RelaySettings(**{"webhook_url": URL, "rate_limit_ms": 1000, **overrides})
        clock = FakeClock()
        return DeliveryEngine(settings, transport, clock=clock), clock

    def test_all_succeed(self) -> None:
        transport = ScriptedTransport()
        engine, _ = self._engine(transport)
        result = engine.send_batch(_items(3))
        assert result.success is True
        assert result.success_count == 3
        assert result.total_count == 3
        assert transport.call_count == 3

    def test_failure_is_independent(self) -> None:
        transport = ScriptedTransport(default=_fail_item(4))
        engine, _ = self._engine(transport)
        result = engine.send_batch(_items(7))
        assert result.success is False
        assert result.success_count == 6
        assert result.total_count == 7
        attempted = [r.json()["item"] for r in transport.requests]
        assert attempted == [1, 2, 3, 4, 5, 6, 7]
        assert result.results[3].response_code == 400

    def test_pacing_between_chunks_only(self) -> None:
        engine, clock = self._engine(ScriptedTransport())
        engine.send_batch(_items(7))
        # two chunks (5 + 2): one pause, no per-item throttling
        assert clock.sleeps == [1.0]

    def test_custom_batch_size(self) -> None:
        engine, clock = self._engine(ScriptedTransport())
        engine.send_batch(_items(6), batch_size=2)
        assert clock.sleeps == [1.0, 1.0]

    def test_batch_size_from_settings(self) -> None:
        engine, clock = self._engine(ScriptedTransport(), batch_size=3)
        engine.send_batch(_items(7))
        assert clock.sleeps == [1.0, 1.0]

    def test_duplicates_inside_batch_skipped(self) -> None:
        transport = ScriptedTransport()
        engine, _ = self._engine(transport)
        payload = _items(1)[0]
        result = engine.send_batch([payload, dict(payload)])
        assert result.success_count == 2
        assert result.results[1].skipped is True
        assert transport.call_count == 1

    def test_invalid_item_counted_as_failure(self) -> None:
        engine, _ = self._engine(ScriptedTransport())
        result = engine.send_batch(_items(2) + [{"event_type": "fixtures_1_league"}])
        assert result.success_count == 2
        assert result.total_count == 3
        assert result.to_dict()["success"] is False

    def test_empty_batch(self) -> None:
        engine, clock = self._engine(ScriptedTransport())
        result = engine.send_batch([])
        assert result.success is True
        assert result.total_count == 0
        assert clock.sleeps == []


# ---------------------------------------------------------------------------
# Option checking – bad options come back as results
# ---------------------------------------------------------------------------


class TestSendBatchOptions:
    def _engine(self):
        transport = ScriptedTransport()
        clock = FakeClock()
        engine = DeliveryEngine(RelaySettings(webhook_url=URL), transport, clock=clock)
        return engine, transport, clock

    @pytest.mark.parametrize("batch_size", [0, -1, 2.5, True, "5"])
    def test_invalid_batch_size(self, batch_size) -> None:
        engine, transport, clock = self._engine()
        result = engine.send_batch(_items(3), batch_size=batch_size)
        assert result.success is False
        assert result.total_count == 3
        assert result.success_count == 0
        assert {r.error_code for r in result.results} == {"invalid_option"}
        assert result.results[0].event_type == "fixtures_1_league"
        assert "batch_size" in result.results[0].error
        assert transport.call_count == 0
        assert clock.sleeps == []

    def test_unknown_option(self) -> None:
        engine, transport, _ = self._engine()
        result = engine.send_batch(_items(2), max_retry=5)
        assert [r.error_code for r in result.results] == ["invalid_option", "invalid_option"]
        assert "max_retry" in result.results[0].error
        assert transport.call_count == 0

    def test_invalid_retry_option(self) -> None:
        engine, transport, _ = self._engine()
        result = engine.send_batch(_items(2), max_retries=0)
        assert result.success_count == 0
        assert result.results[0].error_code == "invalid_option"
        assert transport.call_count == 0

    def test_rejected_batch_not_counted_in_metrics(self) -> None:
        engine, _, _ = self._engine()
        engine.send_batch(_items(2), batch_size=-1)
        assert engine.metrics()["total_calls"] == 0

    def test_none_uses_configured_size(self) -> None:
        engine, _, clock = self._engine()
        result = engine.send_batch(_items(6), batch_size=None)
        assert result.success_count == 6
        assert clock.sleeps == [1.0]

    def test_known_options_forwarded(self) -> None:
        engine, transport, _ = self._engine()
        engine.send_batch(_items(1), idempotency_key="round-1")
        assert transport.requests[0].headers["Idempotency-Key"] == "MAKE_IDEMPOTENCY_round-1"
