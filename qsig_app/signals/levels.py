"""
Support/resistance level detection.

Local extrema of the closes, found with a fixed symmetric window, are
clustered by price. A cluster's representative price is the first extremum
absorbed into it and never moves; later extrema merge when they are within
``tolerance_pct`` of their own price from that representative.
"""

from typing import Optional, Sequence

from ..data.models import PricePoint
from .models import Level


def detect_levels(
    series: Sequence[PricePoint],
    window: int = 5,
    tolerance_pct: float = 0.004,
    max_levels: int = 8
) -> tuple[Level, ...]:
    """
    Rank price clusters by how often they acted as a local extremum.

    Args:
        series: Price series
        window: Half-width of the extremum window
        tolerance_pct: Merge distance as a fraction of the candidate price
        max_levels: Number of strongest levels kept

    Returns:
        Levels sorted by descending hits; empty when the series is shorter
        than ``2 * window + 1``
    """
    if len(series) < window * 2 + 1:
        return ()

    closes = [p.close for p in series]
    clusters: list[list[float]] = []  # [representative price, hits]

    for i in range(window, len(closes) - window):
        segment = closes[i - window:i + window + 1]
        c = closes[i]
        if c != max(segment) and c != min(segment):
            continue

        tolerance = c * tolerance_pct
        for cluster in clusters:
            if abs(cluster[0] - c) <= tolerance:
                cluster[1] += 1
                break
        else:
            clusters.append([c, 1])

    # sorted() is stable, so equal-hit levels keep discovery order
    ranked = sorted(clusters, key=lambda cluster: cluster[1], reverse=True)
    return tuple(Level(price=price, hits=int(hits)) for price, hits in ranked[:max_levels])


def nearest_above(levels: Sequence[Level], price: float) -> Optional[float]:
    """Lowest level strictly above ``price``, or None."""
    above = [level.price for level in levels if level.price > price]
    return min(above) if above else None


def nearest_below(levels: Sequence[Level], price: float) -> Optional[float]:
    """Highest level strictly below ``price``, or None."""
    below = [level.price for level in levels if level.price < price]
    return max(below) if below else None
