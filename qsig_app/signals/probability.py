"""
Directional probability model.

A transparent weighted blend of three bounded drivers, squashed through a
logistic curve:

- rsi_tilt: oscillator distance from 50, scaled to roughly [-1, 1]
- ma_trend: relative spread of the fast over the slow moving average, halved
- momentum: tanh of half the z-score of the latest MACD histogram value
  against its recent window

This is a heuristic, not a fitted model.
"""

import math
from typing import Optional, Sequence

from ..config.defaults import EngineConfig, get_default_config
from ..metrics.calculator import build_indicator_frame
from ..metrics.stats import zscore
from ..models.indicators import IndicatorFrame
from .models import ProbabilityDrivers, ProbabilityEstimate


def _logistic(x: float) -> float:
    if x >= 0:
        return 1 / (1 + math.exp(-x))
    e = math.exp(x)
    return e / (1 + e)


def compute_probability_drivers(
    closes: Sequence[float],
    config: Optional[EngineConfig] = None,
    frame: Optional[IndicatorFrame] = None
) -> ProbabilityDrivers:
    """
    Compute the individual drivers and their blended score.

    Args:
        closes: Full close-price sequence
        config: Engine configuration (defaults when None)
        frame: Precomputed indicator frame for ``closes``, if available

    Returns:
        All-zero drivers below the minimum point count
    """
    config = config or get_default_config()
    params = config.probability

    if len(closes) < params.min_points:
        return ProbabilityDrivers()

    if frame is None:
        frame = build_indicator_frame(closes, config.indicators)

    rsi_last = frame.last("rsi")
    if rsi_last is None:
        rsi_last = 50.0
    rsi_tilt = (rsi_last - 50) / 50

    sma_fast_last = frame.last("sma20")
    sma_slow_last = frame.last("sma50")
    if sma_fast_last is None:
        sma_fast_last = closes[-1]
    if sma_slow_last is None:
        sma_slow_last = closes[-1]
    ma_trend = ((sma_fast_last - sma_slow_last) / (sma_slow_last or 1)) * params.trend_scale

    reference = [
        h for h in frame.histogram[-params.histogram_window:]
        if h is not None and math.isfinite(h)
    ]
    hist_last = frame.last("histogram")
    if hist_last is None:
        hist_last = 0.0
    momentum = math.tanh(zscore(hist_last, reference) / 2)

    score = (
        params.rsi_weight * rsi_tilt +
        params.trend_weight * ma_trend +
        params.momentum_weight * momentum
    )

    return ProbabilityDrivers(
        rsi_tilt=rsi_tilt,
        ma_trend=ma_trend,
        momentum=momentum,
        score=score,
    )


def compute_direction_probability(
    closes: Sequence[float],
    config: Optional[EngineConfig] = None,
    frame: Optional[IndicatorFrame] = None
) -> ProbabilityEstimate:
    """
    Estimate the probability of the next move being up versus down.

    Returns exactly ``up=0.5, down=0.5, score=0`` for fewer than the minimum
    number of closes (60 by default).
    """
    config = config or get_default_config()

    if len(closes) < config.probability.min_points:
        return ProbabilityEstimate.neutral()

    drivers = compute_probability_drivers(closes, config, frame)
    up = _logistic(config.probability.logistic_slope * drivers.score)

    return ProbabilityEstimate(up=up, down=1 - up, score=drivers.score)
