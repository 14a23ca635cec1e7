"""Builds the per-index indicator frame for a close-price sequence"""

from typing import Optional, Sequence

from ..config.defaults import IndicatorParams
from ..models.indicators import IndicatorFrame
from .indicators import convergence_divergence, moving_average, oscillator


def build_indicator_frame(
    closes: Sequence[float],
    params: Optional[IndicatorParams] = None
) -> IndicatorFrame:
    """
    Compute every indicator column from scratch.

    Args:
        closes: Close prices in series order
        params: Indicator windows (defaults when None)

    Returns:
        IndicatorFrame aligned 1:1 with ``closes``
    """
    params = params or IndicatorParams()

    macd = convergence_divergence(closes, params.macd_fast, params.macd_slow, params.macd_signal)

    return IndicatorFrame(
        sma20=tuple(moving_average(closes, params.sma_fast)),
        sma50=tuple(moving_average(closes, params.sma_slow)),
        rsi=tuple(oscillator(closes, params.rsi_period)),
        macd_line=tuple(macd.macd_line),
        signal_line=tuple(macd.signal_line),
        histogram=tuple(macd.histogram),
    )
