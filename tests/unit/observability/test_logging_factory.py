"""Unit tests for structlog wiring."""
from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from matchday_relay.application.webhooks import WebhookSender
from matchday_relay.observability.logging import JsonLoggerFactory, get_logger
from matchday_relay.testing import FakeClock, ScriptedTransport


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJsonLoggerFactory:
    def test_emits_json_with_static_fields(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure(logging.INFO, service="matchday-relay")
        structlog.get_logger("relay.test").info("relay.started", lanes=8)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "relay.started"
        assert event["lanes"] == 8
        assert event["service"] == "matchday-relay"
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_level_filters(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        structlog.get_logger("relay.test").info("relay.quiet")
        assert "relay.quiet" not in capsys.readouterr().err


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("relay", component="engine").info("relay.ping")
        assert logs == [{"component": "engine", "event": "relay.ping", "log_level": "info"}]

    def test_sender_events(self) -> None:
        sender = WebhookSender(
            ScriptedTransport([500, 200]), user_agent="t", retry_delay=0.5, clock=FakeClock()
        )
        with capture_logs() as logs:
            sender.send("https://hook.test", {"event_type": "kick_off"})
        events = [entry["event"] for entry in logs]
        assert events == ["webhook.retry_scheduled", "webhook.delivered"]
        assert logs[0]["delay_seconds"] == 0.5
        assert logs[0]["event_type"] == "kick_off"
