"""
Trend and momentum indicators.

Every function returns a list aligned 1:1 with its input. Positions before an
indicator's warm-up window hold None; 0.0 is always a real computed value.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .stats import mean


@dataclass(frozen=True)
class MacdResult:
    """Convergence-divergence line, its signal line and their difference."""
    macd_line: list[float]
    signal_line: list[float]
    histogram: list[float]


def moving_average(values: Sequence[float], period: int) -> list[Optional[float]]:
    """
    Simple moving average over a trailing window.

    Args:
        values: Input sequence
        period: Window length

    Returns:
        None for indices below ``period - 1``, else the window mean
    """
    return [
        None if i + 1 < period else mean(values[i + 1 - period:i + 1])
        for i in range(len(values))
    ]


def exponential_average(values: Sequence[float], period: int) -> list[float]:
    """
    Exponential moving average seeded with the first raw value.

    Uses ``k = 2 / (period + 1)`` and ``next = (v - prev) * k + prev``.
    """
    k = 2 / (period + 1)
    result: list[float] = []
    prev = 0.0
    for i, v in enumerate(values):
        prev = v if i == 0 else (v - prev) * k + prev
        result.append(prev)
    return result


def _relative_strength(avg_gain: float, avg_loss: float) -> float:
    """100 with no losses, except a window with no movement at all, which reads 50."""
    if avg_loss == 0:
        if avg_gain == 0:
            return 50.0
        return 100.0
    return 100 - 100 / (1 + avg_gain / avg_loss)


def oscillator(closes: Sequence[float], period: int = 14) -> list[Optional[float]]:
    """
    Relative strength oscillator (0-100) with Wilder smoothing.

    The first average gain/loss is the plain mean of the first ``period``
    first differences; each later one is
    ``(prev * (period - 1) + current) / period``.
    A window with neither gains nor losses reads 50 rather than 100, so a
    constant series stays neutral.

    Returns:
        None for the first ``period`` indices; all None when
        ``len(closes) <= period``
    """
    if len(closes) <= period:
        return [None] * len(closes)

    gains = []
    losses = []
    for i in range(1, len(closes)):
        diff = closes[i] - closes[i - 1]
        gains.append(max(0.0, diff))
        losses.append(max(0.0, -diff))

    values: list[Optional[float]] = [None] * period
    avg_gain = mean(gains[:period])
    avg_loss = mean(losses[:period])
    values.append(_relative_strength(avg_gain, avg_loss))

    for i in range(period + 1, len(closes)):
        avg_gain = (avg_gain * (period - 1) + gains[i - 1]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i - 1]) / period
        values.append(_relative_strength(avg_gain, avg_loss))

    return values


def convergence_divergence(
    closes: Sequence[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9
) -> MacdResult:
    """
    Moving average convergence-divergence.

    All three output sequences are full length; exponential averages are
    defined from the very first element.
    """
    ema_fast = exponential_average(closes, fast)
    ema_slow = exponential_average(closes, slow)
    macd_line = [f - s for f, s in zip(ema_fast, ema_slow)]
    signal_line = exponential_average(macd_line, signal)
    histogram = [m - s for m, s in zip(macd_line, signal_line)]
    return MacdResult(macd_line=macd_line, signal_line=signal_line, histogram=histogram)
