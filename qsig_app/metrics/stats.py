"""Mean, standard deviation and z-score over plain float sequences"""

import math
from typing import Sequence


def mean(values: Sequence[float]) -> float:
    """
    Arithmetic mean; 0.0 for an empty sequence.

    The divisor is floored at one so an empty window never divides by zero.
    """
    return sum(values) / (len(values) or 1)


def stdev(values: Sequence[float]) -> float:
    """Population standard deviation; 0.0 for an empty sequence."""
    m = mean(values)
    variance = mean([(v - m) ** 2 for v in values])
    return math.sqrt(variance) if variance > 0 else 0.0


def zscore(value: float, values: Sequence[float]) -> float:
    """
    Deviation of ``value`` from the mean of ``values`` in standard deviations.

    Returns 0.0 when the reference window has zero or non-finite spread.
    """
    s = stdev(values)
    if not math.isfinite(s) or s == 0:
        return 0.0
    return (value - mean(values)) / s
