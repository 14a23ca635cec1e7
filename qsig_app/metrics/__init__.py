"""Indicator library and statistics utilities over close-price sequences"""

from .calculator import build_indicator_frame
from .indicators import (
    MacdResult,
    convergence_divergence,
    exponential_average,
    moving_average,
    oscillator,
)
from .stats import mean, stdev, zscore

__all__ = [
    "build_indicator_frame",
    "MacdResult",
    "convergence_divergence",
    "exponential_average",
    "moving_average",
    "oscillator",
    "mean",
    "stdev",
    "zscore",
]
