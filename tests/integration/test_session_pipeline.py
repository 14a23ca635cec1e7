"""End-to-end pipeline: history load, ticks, entry and automatic exits."""

import json

import pytest

from qsig_app.data.parsers import parse_market_chart, parse_trade_tick
from qsig_app.delivery.memory_delivery import MemoryAlertDelivery
from qsig_app.engine import SignalSession
from qsig_app.errors import FetchError
from qsig_app.signals.models import Side
from qsig_app.state.models import ExitKind


def market_chart_payload(closes):
    start_ms = 1_704_067_200_000
    return json.dumps({"prices": [[start_ms + i * 3_600_000, c] for i, c in enumerate(closes)]})


class TestSessionPipeline:
    """Drive a session the way a live caller does."""

    def test_breakout_entry_then_take_profit(self):
        closes = [100.0 + i for i in range(100)]
        closes[10] = 250.0

        alerts = MemoryAlertDelivery()
        session = SignalSession(alerts=alerts)
        session.load_series(parse_market_chart(market_chart_payload(closes)))

        signal = session.result.signal
        assert signal.side == Side.LONG
        assert signal.entry > closes[-1]

        assert session.enter_position(Side.LONG).accepted
        assert session.position.entry == signal.entry

        # Between stop and target: still open
        price = parse_trade_tick('{"e": "trade", "p": "250.0"}')
        assert session.apply_live_tick(price) is None
        assert session.position is not None

        event = session.apply_live_tick(parse_trade_tick({"p": str(signal.take_profit + 1)}))

        assert event.kind == ExitKind.TAKE_PROFIT
        assert session.position is None
        assert alerts.messages[0].startswith("LONG opened @ ")
        assert alerts.messages[-1].startswith("Take Profit hit @ ")

    def test_flat_history_never_trades(self):
        session = SignalSession()
        session.load_series(parse_market_chart({"prices": [[i * 1000, 100.0] for i in range(60)]}))

        assert session.result.signal.side == Side.NEUTRAL
        assert not session.enter_position(Side.LONG).accepted
        assert not session.enter_position(Side.SHORT).accepted


class StaticHistory:
    """History source serving a fixed market-chart payload."""

    def __init__(self, payload):
        self.payload = payload
        self.requests = []

    def get_historical_series(self, range_days, quote_currency):
        self.requests.append((range_days, quote_currency))
        return parse_market_chart(self.payload)


class FailingHistory:
    def get_historical_series(self, range_days, quote_currency):
        raise FetchError("Market fetch failed: 429", status_code=429)


class ScriptedTicks:
    """Live source replaying trade messages."""

    def __init__(self, messages):
        self.messages = messages

    def ticks(self):
        for message in self.messages:
            price = parse_trade_tick(message)
            if price is not None:
                yield price


class TestFeedSources:
    """Drive a session from history and live-tick sources."""

    def test_history_then_stream(self):
        history = StaticHistory(market_chart_payload([100.0 + i for i in range(100)]))
        session = SignalSession()

        assert session.load_history(history) is None
        assert history.requests == [(30, "usd")]
        assert session.enter_position(Side.LONG).accepted

        ticks = ScriptedTicks(['{"p": "NaN"}', '{"p": "202.5"}', '{"p": "203.0"}'])
        events = list(session.stream_ticks(ticks))

        assert [e.kind for e in events] == [ExitKind.TAKE_PROFIT]
        assert events[0].price == 202.5
        assert session.series[-1].close == 203.0
        assert session.position is None

    def test_fetch_failure_keeps_series(self, rising_series):
        session = SignalSession()
        session.load_series(rising_series)

        with pytest.raises(FetchError) as exc_info:
            session.load_history(FailingHistory())

        assert exc_info.value.status_code == 429
        assert session.series == rising_series
