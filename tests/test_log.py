"""
Context-aware logging tests
"""

import pytest
from types import SimpleNamespace
from loguru import logger

from semdoc.config import appsettings
from semdoc.lib.log import LOG, state_connectToLogger, verbosity_get


@pytest.fixture
def captured():
    """Messages logged while the test runs; disconnects any state afterwards"""
    messages = []
    sink_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
    state_connectToLogger(None)


class TestVerbosity:
    """Test filtering by the connected state's verbosity"""

    def test_silent_without_state(self, captured):
        """Library use logs nothing"""
        state_connectToLogger(None)
        assert verbosity_get() == 0
        LOG("hidden", level=1)
        assert captured == []

    def test_levels(self, captured):
        """Messages above the connected verbosity are dropped"""
        state_connectToLogger(SimpleNamespace(verbosity=2))
        LOG("normal", level=1)
        LOG("verbose", level=2)
        LOG("debug", level=3)
        assert captured == ["normal", "verbose"]

    def test_debug_mode_shows_everything(self, captured, monkeypatch):
        """Debug mode logs regardless of state"""
        monkeypatch.setattr(appsettings, "debug_mode", True)
        state_connectToLogger(None)
        LOG("trace", level=3)
        assert captured == ["trace"]
