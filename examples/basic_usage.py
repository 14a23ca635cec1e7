#!/usr/bin/env python3
"""
Basic Usage Example - qsig signal engine

This script demonstrates the basic usage of the signal engine with a
simulated price history. It shows how to:
- Load a market-chart payload into a session
- Read the probability estimate, levels, projection and signal
- Enter a position that agrees with the signal
- Stream live ticks until an exit rule fires

Run: python examples/basic_usage.py
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterator, List

from qsig_app.data.models import Series
from qsig_app.data.parsers import parse_coin_fundamentals, parse_market_chart, parse_trade_tick
from qsig_app.delivery import StdoutAlertDelivery
from qsig_app.engine import SignalSession
from qsig_app.logging import configure_logging
from qsig_app.signals.models import Side


def create_market_chart(points: int = 240, start_price: float = 0.5) -> Dict[str, Any]:
    """Create a market-chart payload with a gentle uptrend and a wave."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    prices: List[List[float]] = []
    for i in range(points):
        ts = start + timedelta(hours=i)
        price = start_price * (1 + 0.0015 * i + 0.02 * math.sin(i / 9))
        prices.append([ts.timestamp() * 1000, round(price, 6)])
    return {"prices": prices}


def create_trade_tick(price: float) -> str:
    """Create a trade-stream message."""
    return '{"e": "trade", "p": "%.6f"}' % price


class SimulatedHistory:
    """History source backed by a generated market-chart payload."""

    def get_historical_series(self, range_days: int, quote_currency: str) -> Series:
        return parse_market_chart(create_market_chart(points=range_days * 24))


class SimulatedTrades:
    """Live source stepping the price away from a start level."""

    def __init__(self, start: float, step: float, count: int = 20):
        self.start = start
        self.step = step
        self.count = count

    def ticks(self) -> Iterator[float]:
        price = self.start
        for _ in range(self.count):
            price *= 1 + self.step
            tick = parse_trade_tick(create_trade_tick(price))
            if tick is not None:
                yield tick


def print_evaluation(session: SignalSession) -> None:
    result = session.result
    signal = result.signal
    print(f"  probability: up={result.probability.up:.3f} down={result.probability.down:.3f}")
    print(f"  levels: {[round(level.price, 4) for level in result.levels]}")
    print(f"  projection: {result.projection.pct * 100:+.2f}% -> {result.projection.target:.6f}")
    print(f"  signal: {signal.side.value} ({signal.long_pct}% / {signal.short_pct}%) - {signal.reason}")
    if signal.is_directional:
        print(f"  entry={signal.entry:.6f} sl={signal.stop_loss:.6f} tp={signal.take_profit:.6f}")


def main():
    """Run the basic usage example."""
    configure_logging(level="WARNING")

    print("qsig signal engine - basic usage")
    print("=" * 40)

    session = SignalSession(alerts=StdoutAlertDelivery())

    fundamentals = parse_coin_fundamentals({
        "name": "XRP",
        "symbol": "xrp",
        "market_data": {"current_price": {"usd": 0.5}, "market_cap": {"usd": 2.7e10}},
    })
    print(f"\n{fundamentals.name} ({fundamentals.symbol}) cap ${fundamentals.market_cap:,.0f}")

    print("\n1. Loading history")
    session.load_history(SimulatedHistory(), range_days=10)
    print(f"  {len(session.series)} points, last close {session.series[-1].close}")
    print_evaluation(session)

    print("\n2. Entering a position")
    side = session.result.signal.side
    if side == Side.NEUTRAL:
        side = Side.LONG
    outcome = session.enter_position(side)
    if not outcome.accepted:
        print(f"  entry rejected: {outcome.rejected_reason}")
        return

    print("\n3. Streaming live ticks")
    step = 0.002 if side == Side.LONG else -0.002
    trades = SimulatedTrades(session.series[-1].close, step)
    for event in session.stream_ticks(trades):
        print(f"  position closed: {event.kind.value} @ {event.price:.6f}")
        break

    if session.position is not None:
        session.close_position()

    print(f"\nExit events recorded: {len(session.exit_events)}")


if __name__ == "__main__":
    main()
