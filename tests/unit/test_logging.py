"""Tests for the structured logging helpers."""

from unittest.mock import Mock

from qsig_app.logging import configure_logging, get_logger
from qsig_app.logging.config import (
    flatten_context,
    get_signal_logger,
    get_state_logger,
    log_signal_decision,
    log_state_transition,
)


class TestLoggers:
    """Test logger factories."""

    def test_configure_and_get(self):
        configure_logging(level="DEBUG", format_json=True)
        logger = get_logger("qsig_app.test")
        assert logger is not None

    def test_subsystem_loggers(self):
        assert get_signal_logger("x") is not None
        assert get_state_logger("x") is not None


class TestLogHelpers:
    """Test standardized event helpers."""

    def test_directional_signal_logged_at_info(self):
        logger = Mock()

        log_signal_decision(logger, "LONG", 70, 30, "Up bias + breakout of nearest resistance")

        logger.bind.assert_called_once_with(
            side="LONG",
            long_pct=70,
            short_pct=30,
            reason="Up bias + breakout of nearest resistance",
        )
        logger.bind.return_value.info.assert_called_once_with("Signal derived")

    def test_neutral_signal_logged_at_debug(self):
        logger = Mock()

        log_signal_decision(logger, "NEUTRAL", 50, 50, "No edge > 55%", context={"points": 60})

        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"points": 60})
        bound.bind.return_value.debug.assert_called_once_with("Signal derived")
        bound.bind.return_value.info.assert_not_called()

    def test_state_transition(self):
        logger = Mock()

        log_state_transition(logger, "flat", "open", "entry")

        logger.bind.assert_called_once_with(from_state="flat", to_state="open", trigger="entry")
        logger.bind.return_value.info.assert_called_once_with("State transition")


class TestFlattenContext:
    """Test the context-lifting processor."""

    def test_context_keys_lifted(self):
        event = {"event": "State transition", "trigger": "enter", "context": {"side": "LONG", "entry": 1.5}}

        result = flatten_context(None, "info", event)

        assert result == {"event": "State transition", "trigger": "enter", "side": "LONG", "entry": 1.5}

    def test_event_keys_take_precedence(self):
        event = {"event": "Signal derived", "side": "LONG", "context": {"side": "SHORT", "score": 0.2}}

        result = flatten_context(None, "info", event)

        assert result["side"] == "LONG"
        assert result["score"] == 0.2

    def test_without_context(self):
        assert flatten_context(None, "debug", {"event": "x"}) == {"event": "x"}
