"""Testing fakes."""
from matchday_relay.testing.fakes.clock import FakeClock
from matchday_relay.testing.fakes.transport import RecordedRequest, ScriptedTransport

__all__ = ["FakeClock", "RecordedRequest", "ScriptedTransport"]
