"""
Trade signal generation.

Combines the directional probability with the nearest support/resistance
levels around the last close into a LONG/SHORT/NEUTRAL signal:

- LONG when up > edge: entry just above the nearest resistance (breakout),
  else at the last close; stop at the lower of nearest support and
  entry * (1 - stop_pct); target entry * (1 + take_profit_pct)
- SHORT when down > edge: the mirror image around the nearest support
- NEUTRAL otherwise, with no price plan

The probability pair is reported as integer percentages on every side.
"""

import math
from typing import Optional, Sequence

from ..config.defaults import EngineConfig, get_default_config
from ..data.models import PricePoint, closes_of
from ..logging.config import get_signal_logger, log_signal_decision
from .levels import detect_levels, nearest_above, nearest_below
from .models import Level, ProbabilityEstimate, Side, Signal
from .probability import compute_direction_probability

signal_logger = get_signal_logger(__name__)

INSUFFICIENT_DATA_REASON = "insufficient data"
LONG_REASON = "Up bias + breakout of nearest resistance"
SHORT_REASON = "Down bias + breakdown of nearest support"


def to_percent(probability: float) -> int:
    """Round a probability to integer percent, halves rounding up."""
    return int(math.floor(probability * 100 + 0.5))


def generate_signal(
    series: Sequence[PricePoint],
    closes: Optional[Sequence[float]] = None,
    config: Optional[EngineConfig] = None,
    probability: Optional[ProbabilityEstimate] = None,
    levels: Optional[Sequence[Level]] = None
) -> Signal:
    """
    Derive the trade signal for the latest point of a series.

    Args:
        series: Price series
        closes: Closes of ``series`` (derived when None)
        config: Engine configuration (defaults when None)
        probability: Precomputed estimate for ``closes``, if available
        levels: Precomputed levels using the signal window, if available

    Returns:
        Signal; NEUTRAL 50/50 with reason "insufficient data" below the
        minimum point count
    """
    config = config or get_default_config()
    params = config.signal

    if len(series) < params.min_points:
        return Signal(
            side=Side.NEUTRAL,
            long_pct=50,
            short_pct=50,
            reason=INSUFFICIENT_DATA_REASON,
        )

    if closes is None:
        closes = closes_of(series)
    if probability is None:
        probability = compute_direction_probability(closes, config)
    if levels is None:
        levels = detect_levels(
            series,
            window=params.level_window,
            tolerance_pct=params.level_tolerance_pct,
            max_levels=config.levels.max_levels,
        )

    last = series[-1].close
    resistance = nearest_above(levels, last)
    support = nearest_below(levels, last)
    long_pct = to_percent(probability.up)
    short_pct = to_percent(probability.down)

    if probability.up > params.edge_threshold:
        entry = resistance * (1 + params.breakout_buffer_pct) if resistance is not None else last
        floor_stop = entry * (1 - params.stop_pct)
        stop_loss = min(support, floor_stop) if support is not None else floor_stop
        signal = Signal(
            side=Side.LONG,
            long_pct=long_pct,
            short_pct=short_pct,
            entry=entry,
            stop_loss=stop_loss,
            take_profit=entry * (1 + params.take_profit_pct),
            reason=LONG_REASON,
        )
    elif probability.down > params.edge_threshold:
        entry = support * (1 - params.breakout_buffer_pct) if support is not None else last
        ceiling_stop = entry * (1 + params.stop_pct)
        stop_loss = max(resistance, ceiling_stop) if resistance is not None else ceiling_stop
        signal = Signal(
            side=Side.SHORT,
            long_pct=long_pct,
            short_pct=short_pct,
            entry=entry,
            stop_loss=stop_loss,
            take_profit=entry * (1 - params.take_profit_pct),
            reason=SHORT_REASON,
        )
    else:
        signal = Signal(
            side=Side.NEUTRAL,
            long_pct=long_pct,
            short_pct=short_pct,
            reason=f"No edge > {to_percent(params.edge_threshold)}%",
        )

    log_signal_decision(
        signal_logger,
        side=signal.side.value,
        long_pct=long_pct,
        short_pct=short_pct,
        reason=signal.reason,
        context={
            "last_close": last,
            "nearest_resistance": resistance,
            "nearest_support": support,
            "score": probability.score,
        }
    )

    return signal
