"""Testing helpers – fakes for the relay's ports."""
from matchday_relay.testing.fakes import FakeClock, RecordedRequest, ScriptedTransport

__all__ = ["FakeClock", "RecordedRequest", "ScriptedTransport"]
